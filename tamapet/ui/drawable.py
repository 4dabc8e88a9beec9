"""Base classes for things that can be drawn onto a canvas."""

from __future__ import annotations

import abc

from tamapet.canvas import Canvas
from tamapet.intrusive_list import ListElement


class Drawable(ListElement, abc.ABC):
    """Something that renders itself onto a canvas and can sit in a draw list."""

    @abc.abstractmethod
    def draw(self, canvas: Canvas, offset_y: int = 0, offset_x: int = 0) -> None:
        """Render onto ``canvas`` relative to the given offset."""


class AbstractDrawable(Drawable):
    """A positioned drawable that can be hidden."""

    def __init__(self, y: int, x: int) -> None:
        super().__init__()
        self.y = y
        self.x = x
        self.visible = True

    def draw(self, canvas: Canvas, offset_y: int = 0, offset_x: int = 0) -> None:
        if self.visible:
            self._draw_impl(canvas, offset_y + self.y, offset_x + self.x)

    @abc.abstractmethod
    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        """Render with the element's own position already applied."""