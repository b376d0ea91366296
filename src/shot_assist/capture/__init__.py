"""Capture module - screen-space types, X11 frame source, and PNG snapshots."""

from .frame import Point, Frame
from .x11_capture import X11FrameSource, save_snapshot

__all__ = [
    'Point',
    'Frame',
    'X11FrameSource',
    'save_snapshot',
]
