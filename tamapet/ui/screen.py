"""The full display: a fixed-size canvas plus the drawables shown on it."""

from __future__ import annotations

from collections.abc import Iterable

from tamapet.canvas import Canvas, Orientation
from tamapet.intrusive_list import IntrusiveList
from tamapet.ui.drawable import Drawable

SCREEN_HEIGHT = 64
SCREEN_WIDTH = 128


class Screen:
    """A 64x128 vertical-layout canvas redrawn from a list of drawables."""

    def __init__(self, rows: Iterable[Iterable[bool]] = ()) -> None:
        self._canvas = Canvas(SCREEN_HEIGHT, SCREEN_WIDTH, Orientation.VERTICAL, rows)
        self._drawables: IntrusiveList[Drawable] = IntrusiveList()

    @property
    def drawables(self) -> IntrusiveList[Drawable]:
        return self._drawables

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    def redraw(self) -> None:
        """Clear the canvas and draw every drawable in list order."""
        self._canvas.fill_rectangle(
            0, 0, self._canvas.height, self._canvas.width, False
        )
        for item in self._drawables:
            item.draw(self._canvas, 0, 0)

    def raw_data(self) -> bytes:
        return self._canvas.raw_data()

    def raw_size(self) -> int:
        return self._canvas.raw_size()