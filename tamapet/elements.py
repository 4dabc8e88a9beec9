"""Composite widgets of the pet's status panel."""

from __future__ import annotations

from tamapet.canvas import Canvas
from tamapet.ui.bars import IndicatorBar, ProgressBar
from tamapet.ui.container import Container
from tamapet.ui.drawable import AbstractDrawable
from tamapet.ui.image import Image


class _Metric(AbstractDrawable):
    """An 8x8 icon with a tall bar below it."""

    ICON_Y = 0
    ICON_X = 0
    ICON_HEIGHT = 8
    ICON_WIDTH = 8
    BAR_Y = 10
    BAR_X = 0
    BAR_HEIGHT = 54
    BAR_WIDTH = 8

    def __init__(self, y: int, x: int, icon: Canvas, bar: AbstractDrawable) -> None:
        super().__init__(y, x)
        self.container = Container(0, 0)
        self.icon = Image(self.ICON_Y, self.ICON_X, icon)
        self.bar = bar
        self.container.drawables.push_back(self.icon)
        self.container.drawables.push_back(self.bar)

    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        self.container.draw(canvas, offset_y, offset_x)


class MetricProgress(_Metric):
    """Icon with a progress bar."""

    def __init__(self, y: int, x: int, icon: Canvas) -> None:
        bar = ProgressBar(self.BAR_Y, self.BAR_X, self.BAR_HEIGHT, self.BAR_WIDTH)
        super().__init__(y, x, icon, bar)


class MetricIndicator(_Metric):
    """Icon with an indicator bar."""

    def __init__(self, y: int, x: int, icon: Canvas) -> None:
        bar = IndicatorBar(self.BAR_Y, self.BAR_X, self.BAR_HEIGHT, self.BAR_WIDTH)
        super().__init__(y, x, icon, bar)


class IconBar(AbstractDrawable):
    """A row of ``count`` icons, of which a proportional prefix is shown."""

    MAX_PROGRESS = 0xFF

    def __init__(
        self, y: int, x: int, asset: Canvas, asset_offset: int, count: int
    ) -> None:
        super().__init__(y, x)
        self.container = Container(0, 0)
        self.icons = [Image(0, asset_offset * i, asset) for i in range(count)]
        for icon in self.icons:
            self.container.drawables.push_back(icon)

    def set_progress(self, progress: int) -> None:
        """Show the icons covered by ``progress`` out of MAX_PROGRESS."""
        if not 0 <= progress <= self.MAX_PROGRESS:
            raise ValueError(
                f"progress must be within 0..{self.MAX_PROGRESS}, got {progress}"
            )
        total = len(self.icons)
        for i, icon in enumerate(self.icons):
            icon.visible = i * self.MAX_PROGRESS < total * progress

    def _draw_impl(self, canvas: Canvas, offset_y: int, offset_x: int) -> None:
        self.container.draw(canvas, offset_y, offset_x)