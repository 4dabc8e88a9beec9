"""Monochrome pixel canvas backed by a packed bit array."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from tamapet.bitarray import BitArray


class Orientation(enum.Enum):
    """How pixels are laid out in the packed storage."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Canvas:
    """A height x width grid of on/off pixels, addressed as canvas[y, x]."""

    def __init__(
        self,
        height: int,
        width: int,
        orientation: Orientation = Orientation.VERTICAL,
        rows: Iterable[Iterable[bool]] = (),
    ) -> None:
        if height < 0 or width < 0:
            raise ValueError("canvas dimensions must not be negative")
        self._height = height
        self._width = width
        self._orientation = orientation
        self._bits = BitArray(height * width)
        for y, row in zip(range(height), rows):
            for x, value in zip(range(width), row):
                self[y, x] = value

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def _index(self, pos: tuple[int, int]) -> int:
        y, x = pos
        if not 0 <= y < self._height or not 0 <= x < self._width:
            raise IndexError(f"pixel {pos} outside {self._height}x{self._width} canvas")
        if self._orientation is Orientation.VERTICAL:
            return x * self._height + y
        return y * self._width + x

    def __getitem__(self, pos: tuple[int, int]) -> bool:
        return self._bits[self._index(pos)]

    def __setitem__(self, pos: tuple[int, int], value: bool) -> None:
        self._bits[self._index(pos)] = bool(value)

    def raw_data(self) -> bytes:
        """Packed pixel storage, in the canvas orientation."""
        return self._bits.to_bytes()

    def raw_size(self) -> int:
        return self._bits.raw_size()

    def _span(self, start: int, length: int, limit: int) -> range:
        if start < 0 or length <= 0:
            return range(0)
        return range(start, min(start + length, limit))

    def draw(self, other: Canvas, y: int, x: int, invert: bool = False) -> Canvas:
        """Copy another canvas onto this one at (y, x), clipped to the edges."""
        for dx in self._span(x, other.width, self._width):
            for dy in self._span(y, other.height, self._height):
                self[dy, dx] = bool(invert) ^ other[dy - y, dx - x]
        return self

    def fill_rectangle(
        self, y: int, x: int, h: int, w: int, color: bool = True
    ) -> Canvas:
        """Set every pixel of the rectangle, clipped to the edges."""
        for px in self._span(x, w, self._width):
            for py in self._span(y, h, self._height):
                self[py, px] = color
        return self

    def draw_rectangle(
        self,
        y: int,
        x: int,
        h: int,
        w: int,
        thickness: int = 1,
        color: bool = True,
    ) -> Canvas:
        """Draw the outline of a rectangle with the given border thickness."""
        self.fill_rectangle(y, x, thickness, w, color)
        self.fill_rectangle(y, x, h, thickness, color)
        self.fill_rectangle(y + h - thickness, x, thickness, w, color)
        self.fill_rectangle(y, x + w - thickness, h, thickness, color)
        return self

    def __repr__(self) -> str:
        return f"Canvas({self._height}, {self._width}, {self._orientation})"