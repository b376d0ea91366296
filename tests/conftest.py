"""Pytest configuration and shared fixtures."""
import pytest
import numpy as np
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from shot_assist.capture.frame import Frame
from shot_assist.errors import CaptureError

RED = (0, 0, 255, 0)  # BGRX
BLACK = (0, 0, 0, 0)


def make_count_frame(x, y, width, height, count, color=RED):
    """Frame whose first `count` pixels are `color` and the rest black."""
    pixels = np.zeros((width * height, 4), dtype=np.uint8)
    pixels[:count] = color
    return Frame(x, y, width, height, pixels.tobytes())


class ScriptedFrameSource:
    """Frame source returning frames with a scripted red-pixel count per capture.

    The last count repeats once the script runs out. An exception instance in
    the script is raised instead of returning a frame. `on_capture` is called
    before every capture (used to advance fake clocks).
    """

    def __init__(self, counts, on_capture=None):
        self.counts = list(counts)
        self.on_capture = on_capture
        self.requests = []

    def capture(self, x, y, width, height):
        index = len(self.requests)
        self.requests.append((x, y, width, height))
        if self.on_capture is not None:
            self.on_capture(index)
        item = self.counts[min(index, len(self.counts) - 1)]
        if isinstance(item, Exception):
            raise item
        return make_count_frame(x, y, width, height, item)


class FakeClock:
    """Deterministic clock; sleep() advances time instead of blocking."""

    def __init__(self, start=0.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, duration):
        self.sleeps.append(duration)
        self.now += duration

    def advance(self, duration):
        self.now += duration


@pytest.fixture
def fake_clock():
    """Create a fresh fake clock at t=0."""
    return FakeClock()


@pytest.fixture
def scripted_source():
    """Factory for scripted frame sources."""
    def factory(counts, on_capture=None):
        return ScriptedFrameSource(counts, on_capture)
    return factory


@pytest.fixture
def failing_source():
    """Frame source whose third capture fails."""
    return ScriptedFrameSource([100, 100, CaptureError("connection lost")])


@pytest.fixture
def sample_frame():
    """Create a small noisy frame (16x8) at screen position (100, 200)."""
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(8, 16, 4), dtype=np.uint8)
    return Frame.from_array(100, 200, pixels)


@pytest.fixture
def game_origin():
    from shot_assist.capture.frame import Point
    return Point(550, 609)
