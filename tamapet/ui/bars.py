"""Vertical progress and indicator bars."""

from __future__ import annotations

from typing import Any

from tamapet.canvas import Canvas
from tamapet.ui.drawable import AbstractDrawable

BYTE_MAX = 0xFF


class _Byte:
    """Attribute restricted to the range 0..255."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name
        self._attr = "_" + name

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self._attr)

    def __set__(self, obj: Any, value: int) -> None:
        if not 0 <= value <= BYTE_MAX:
            raise ValueError(f"{self._name} must be within 0..{BYTE_MAX}, got {value}")
        setattr(obj, self._attr, int(value))


class IndicatorBar(AbstractDrawable):
    """A framed bar with two dashed level marks and a sliding indicator."""

    MAX_VALUE = BYTE_MAX
    BORDER_WIDTH = 1
    LEVEL_THICKNESS = 1
    LEVEL_DASH_LEN = 1
    INDICATOR_THICKNESS = 3

    indicator = _Byte()
    lvl_1 = _Byte()
    lvl_2 = _Byte()

    def __init__(self, y: int, x: int, height: int, width: int) -> None:
        super().__init__(y, x)
        self.height = height
        self.width = width
        self.indicator = self.MAX_VALUE
        self.lvl_2 = 0
        self.lvl_1 = self.MAX_VALUE

    def _row_for(self, value: int, thickness: int, offset_y: int) -> int:
        span = self.height - thickness
        return offset_y + span - span * value // self.MAX_VALUE

    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        canvas.fill_rectangle(offset_y, offset_x, self.height, self.width, False)
        canvas.draw_rectangle(
            offset_y, offset_x, self.height, self.width, self.BORDER_WIDTH
        )
        for level in (self.lvl_1, self.lvl_2):
            self._dash_line(
                canvas,
                self._row_for(level, self.LEVEL_THICKNESS, offset_y),
                offset_x,
                offset_x + self.width,
                self.LEVEL_THICKNESS,
                self.LEVEL_DASH_LEN,
            )
        canvas.fill_rectangle(
            self._row_for(self.indicator, self.INDICATOR_THICKNESS, offset_y),
            offset_x,
            self.INDICATOR_THICKNESS,
            self.width,
        )

    @staticmethod
    def _dash_line(
        canvas: Canvas, y: int, x1: int, x2: int, thickness: int, dash_len: int
    ) -> None:
        x = x1
        while x + dash_len < x2:
            canvas.fill_rectangle(y, x, thickness, dash_len)
            x += dash_len * 2
        if x < x2:
            canvas.fill_rectangle(y, x, thickness, x2 - x)


class ProgressBar(AbstractDrawable):
    """A framed bar filled from the bottom in proportion to ``progress``."""

    MAX_PROGRESS = BYTE_MAX
    BORDER_WIDTH = 1
    OFFSET = 2

    progress = _Byte()

    def __init__(self, y: int, x: int, height: int, width: int) -> None:
        super().__init__(y, x)
        self.height = height
        self.width = width
        self.progress = self.MAX_PROGRESS // 2

    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        canvas.fill_rectangle(offset_y, offset_x, self.height, self.width, False)
        canvas.draw_rectangle(
            offset_y, offset_x, self.height, self.width, self.BORDER_WIDTH
        )
        padding = self.BORDER_WIDTH + self.OFFSET
        filled = (self.height - 2 * padding) * self.progress // self.MAX_PROGRESS
        canvas.fill_rectangle(
            offset_y + self.height - filled - padding,
            offset_x + padding,
            filled,
            self.width - 2 * padding,
        )