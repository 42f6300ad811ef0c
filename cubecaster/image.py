"""An off-screen 32-bit pixel buffer."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Iterable

_MASK = 0xFFFFFFFF


class Image:
    """A width x height grid of 0xAARRGGBB pixels, all zero when created."""

    def __init__(self, width: int, height: int, pixels: Iterable[int] | None = None):
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        if pixels is None:
            self._data = array("I", bytes(4 * width * height))
        else:
            self._data = array("I", (value & _MASK for value in pixels))
            if len(self._data) != width * height:
                raise ValueError("pixel count does not match the image size")

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self._data[y * self.width + x] = color & _MASK

    def pixel(self, x: int, y: int) -> int:
        """Return the colour stored at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self._data[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.fill(0)

    def fill(self, color: int) -> None:
        """Set every pixel to one colour."""
        self._data = array("I", [color & _MASK]) * (self.width * self.height)

    def rgb_bytes(self) -> bytes:
        """Return the pixels as packed 8-bit R, G, B triples, row by row."""
        words = array("I", self._data)
        if sys.byteorder == "big":
            words.byteswap()
        raw = words.tobytes()
        rgb = bytearray(3 * len(words))
        rgb[0::3] = raw[2::4]
        rgb[1::3] = raw[1::4]
        rgb[2::3] = raw[0::4]
        return bytes(rgb)