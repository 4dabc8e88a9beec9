"""Drawables that group other drawables."""

from __future__ import annotations

from tamapet.canvas import Canvas
from tamapet.intrusive_list import IntrusiveList
from tamapet.ui.drawable import AbstractDrawable, Drawable


class Container(AbstractDrawable):
    """Draws all of its children relative to its own position."""

    def __init__(self, y: int, x: int) -> None:
        super().__init__(y, x)
        self._drawables: IntrusiveList[Drawable] = IntrusiveList()

    @property
    def drawables(self) -> IntrusiveList[Drawable]:
        return self._drawables

    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        for item in self._drawables:
            item.draw(canvas, offset_y, offset_x)


class Tabs(AbstractDrawable):
    """Draws only the child at ``index``; nothing if there is no such child."""

    def __init__(self, y: int, x: int, index: int = 0) -> None:
        super().__init__(y, x)
        self._drawables: IntrusiveList[Drawable] = IntrusiveList()
        self.index = index

    @property
    def drawables(self) -> IntrusiveList[Drawable]:
        return self._drawables

    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        if self.index < 0:
            return
        for position, item in enumerate(self._drawables):
            if position == self.index:
                item.draw(canvas, offset_y, offset_x)
                return