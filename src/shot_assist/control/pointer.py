"""Synthetic pointer input through the X11 XTEST extension."""

from typing import Optional

import Xlib.display
import Xlib.error
import Xlib.X
from Xlib.ext import xtest

from shot_assist.capture.frame import Point
from shot_assist.errors import InputError

BUTTONS = {
    "left": 1,
    "middle": 2,
    "right": 3,
}


class X11Pointer:
    """
    Moves, presses and releases the pointer.

    Each call is flushed to the server before returning, so callers can
    treat it as instantaneous. Failures propagate; nothing is retried.
    """

    def __init__(self, display_name: Optional[str] = None, display=None):
        if display is None:
            try:
                display = Xlib.display.Display(display_name)
            except (Xlib.error.DisplayError, OSError) as e:
                raise InputError(f"Unable to connect to X display: {e}") from e
        self.display = display
        if not self.display.has_extension('XTEST'):
            raise InputError("X server does not support the XTEST extension")
        self.root = self.display.screen().root

    def _button(self, button):
        try:
            return BUTTONS[button]
        except KeyError:
            raise ValueError(f"Unknown button '{button}', expected one of {tuple(BUTTONS)}") from None

    def move(self, x: int, y: int):
        xtest.fake_input(self.display, Xlib.X.MotionNotify, x=int(x), y=int(y))
        self.display.sync()

    def press(self, button="left"):
        xtest.fake_input(self.display, Xlib.X.ButtonPress, self._button(button))
        self.display.sync()

    def release(self, button="left"):
        xtest.fake_input(self.display, Xlib.X.ButtonRelease, self._button(button))
        self.display.sync()

    def click(self, button="left"):
        self.press(button)
        self.release(button)

    def position(self) -> Point:
        reply = self.root.query_pointer()
        return Point(reply.root_x, reply.root_y)
