"""A drawable that shows a bitmap."""

from __future__ import annotations

from tamapet.canvas import Canvas
from tamapet.ui.drawable import AbstractDrawable


class Image(AbstractDrawable):
    """Copies ``icon`` onto the target canvas, optionally inverted."""

    def __init__(self, y: int, x: int, icon: Canvas) -> None:
        super().__init__(y, x)
        self.icon = icon
        self.inverted = False

    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        canvas.draw(self.icon, offset_y, offset_x, self.inverted)