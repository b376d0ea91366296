"""Control module - synthetic pointer input."""

from .pointer import X11Pointer, BUTTONS

__all__ = ['X11Pointer', 'BUTTONS']
