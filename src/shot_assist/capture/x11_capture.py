"""X11 screen capture - grabs root-window regions as BGRA frames."""

import os
from typing import Optional, Tuple

import cv2
import Xlib.display
import Xlib.error
import Xlib.X

from shot_assist.capture.frame import Frame, BYTES_PER_PIXEL
from shot_assist.errors import CaptureError

ALL_PLANES = 0xffffffff


class X11FrameSource:
    """Captures screen regions from the X11 root window.

    ZPixmap replies on a 24/32-bit visual come back as BGRX, which is the
    channel order every Frame uses.
    """

    def __init__(self, display_name: Optional[str] = None):
        self.display_name = display_name
        self._display = None
        self._root = None

    def _connect(self):
        if self._display is None:
            try:
                self._display = Xlib.display.Display(self.display_name)
            except (Xlib.error.DisplayError, OSError) as e:
                raise CaptureError(f"Unable to connect to X display: {e}") from e
            self._root = self._display.screen().root
        return self._root

    def capture(self, x: int, y: int, width: int, height: int) -> Frame:
        """Capture the rectangle (x, y, width, height) in screen coordinates.

        Raises:
            CaptureError: on connection or protocol failure, or a short reply.
        """
        root = self._connect()
        try:
            reply = root.get_image(x, y, width, height, Xlib.X.ZPixmap, ALL_PLANES)
        except (Xlib.error.XError, Xlib.error.ConnectionClosedError, OSError) as e:
            raise CaptureError(f"GetImage failed for ({x}, {y}, {width}x{height}): {e}") from e

        data = reply.data
        if isinstance(data, str):
            data = data.encode("latin-1")
        expected = width * height * BYTES_PER_PIXEL
        if len(data) != expected:
            raise CaptureError(
                f"GetImage returned {len(data)} bytes, expected {expected} "
                f"(depth {reply.depth} not supported)"
            )
        return Frame(x, y, width, height, bytes(data))

    def display_info(self) -> Tuple[int, int, float]:
        """Return (width, height, scale) of the default screen.

        Scale is the whole-number ratio of the reported DPI to 96, so a
        monitor reporting its true size near 96 DPI is still 1.0.
        """
        self._connect()
        screen = self._display.screen()
        width = screen.width_in_pixels
        height = screen.height_in_pixels
        if screen.width_in_mms:
            dpi = (width / screen.width_in_mms) * 25.4
            scale = float(round(dpi / 96.0))
        else:
            scale = 1.0
        return width, height, scale

    def monitor_origin(self, x: int, y: int) -> Tuple[int, int]:
        """Return the top-left corner of the monitor containing (x, y).

        Uses RandR monitor info when the server has it. Without RandR the
        whole root window is one monitor at (0, 0).
        """
        root = self._connect()
        if not self._display.has_extension('RANDR'):
            return 0, 0
        try:
            monitors = root.xrandr_get_monitors().monitors
        except Xlib.error.XError as e:
            print(f"[Capture] RandR monitor query failed, assuming one monitor: {e}")
            return 0, 0

        for monitor in monitors:
            if (monitor.x <= x < monitor.x + monitor.width_in_pixels
                    and monitor.y <= y < monitor.y + monitor.height_in_pixels):
                return monitor.x, monitor.y
        return 0, 0

    def close(self):
        if self._display is not None:
            self._display.close()
            self._display = None
            self._root = None


def save_snapshot(frame: Frame, path: str) -> str:
    """Write a frame to disk as PNG (padding byte dropped)."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    bgr = cv2.cvtColor(frame.pixels(), cv2.COLOR_BGRA2BGR)
    if not cv2.imwrite(path, bgr):
        raise OSError(f"Unable to write snapshot to {path}")
    print(f"[Capture] Saved {frame.width}x{frame.height} snapshot to {path}")
    return path
