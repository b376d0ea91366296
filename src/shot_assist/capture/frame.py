"""Screen-space value types - points and captured frames."""

from dataclasses import dataclass

import numpy as np

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Point:
    """Integer position in screen coordinates."""
    x: int
    y: int

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Frame:
    """
    Captured rectangular pixel buffer.

    Pixels are stored row-major, 4 bytes each, in the capture's fixed
    channel order: blue, green, red, unused. (x, y) is the screen position
    of the top-left pixel.
    """
    x: int
    y: int
    width: int
    height: int
    data: bytes

    def __post_init__(self):
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.data) != expected:
            raise ValueError(
                f"Frame buffer is {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height}"
            )

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def pixels(self) -> np.ndarray:
        """Read-only (height, width, 4) uint8 view of the buffer."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, BYTES_PER_PIXEL
        )

    @classmethod
    def from_array(cls, x, y, pixels):
        """Build a frame from a (height, width, 4) uint8 array."""
        pixels = np.ascontiguousarray(pixels, dtype=np.uint8)
        height, width = pixels.shape[:2]
        return cls(x, y, width, height, pixels.tobytes())
