"""
Pytest fixtures for behavior contract tests

These fixtures provide every implementation of a collaborator protocol, so the
same contract tests run against the X11 classes and the in-memory doubles.
"""

import pytest
from typing import Optional
from unittest.mock import MagicMock, Mock, patch

import Xlib.X

from shot_assist.capture.frame import Frame, Point
from shot_assist.capture.x11_capture import X11FrameSource
from shot_assist.control.pointer import X11Pointer, BUTTONS


# ============================================================================
# In-memory implementations
# ============================================================================

class MemoryFrameSource:
    """Frame source serving slices of a fixed virtual screen."""

    def __init__(self, fill: int = 0):
        self.fill = fill

    def capture(self, x: int, y: int, width: int, height: int) -> Frame:
        return Frame(x, y, width, height, bytes([self.fill]) * (width * height * 4))


class MemoryPointer:
    """Pointer that records state instead of sending events."""

    def __init__(self):
        self.pos = Point(0, 0)
        self.held = set()

    def move(self, x: int, y: int) -> None:
        self.pos = Point(x, y)

    def press(self, button: str = "left") -> None:
        if button not in BUTTONS:
            raise ValueError(button)
        self.held.add(button)

    def release(self, button: str = "left") -> None:
        if button not in BUTTONS:
            raise ValueError(button)
        self.held.discard(button)

    def click(self, button: str = "left") -> None:
        self.press(button)
        self.release(button)

    def position(self) -> Point:
        return self.pos


# ============================================================================
# X11 implementations over a mocked display
# ============================================================================

def mocked_x11_frame_source():
    display = MagicMock()

    def get_image(x, y, width, height, fmt, planes):
        return Mock(data=bytes(width * height * 4), depth=24)

    display.screen.return_value.root.get_image.side_effect = get_image
    with patch('shot_assist.capture.x11_capture.Xlib.display.Display', return_value=display):
        source = X11FrameSource()
        source._connect()
    return source


class FakeXServer:
    """Tracks pointer state from XTEST events."""

    def __init__(self):
        self.pos = (0, 0)
        self.held = set()

    def fake_input(self, display, event_type, detail=0, x=0, y=0):
        if event_type == Xlib.X.MotionNotify:
            self.pos = (x, y)
        elif event_type == Xlib.X.ButtonPress:
            self.held.add(detail)
        elif event_type == Xlib.X.ButtonRelease:
            self.held.discard(detail)

    def query_pointer(self):
        return Mock(root_x=self.pos[0], root_y=self.pos[1])


@pytest.fixture(params=["memory", "x11"])
def frame_source(request):
    """Every FrameSource implementation."""
    if request.param == "memory":
        return MemoryFrameSource()
    return mocked_x11_frame_source()


@pytest.fixture(params=["memory", "x11"])
def pointer(request):
    """Every pointer implementation."""
    if request.param == "memory":
        yield MemoryPointer()
        return

    server = FakeXServer()
    display = MagicMock()
    display.has_extension.return_value = True
    display.screen.return_value.root.query_pointer.side_effect = server.query_pointer
    with patch('shot_assist.control.pointer.xtest.fake_input', side_effect=server.fake_input):
        yield X11Pointer(display=display)
