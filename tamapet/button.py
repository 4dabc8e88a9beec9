"""Debounced push button that reports clicks and long holds."""

from __future__ import annotations

import enum

from tamapet.smoothing import MovingSumFilter

FILTER_SIZE = 8
FILTER_THRESHOLD = FILTER_SIZE // 2
HOLD_THRESHOLD = 30


class ButtonEvent(enum.Enum):
    NONE = "none"
    CLICK = "click"
    HOLD = "hold"


class LogicalButton:
    """Turns raw per-tick pin readings into click and hold events."""

    def __init__(self) -> None:
        self._filter = MovingSumFilter(FILTER_SIZE, False)
        self._hold_time = 0

    def _pressed(self, status: bool) -> bool:
        self._filter.update(bool(status))
        return self._filter.sum() >= FILTER_THRESHOLD

    def tick(self, status: bool) -> ButtonEvent:
        """Feed one raw reading and return the event it completes, if any."""
        if self._pressed(status):
            self._hold_time += 1
            if self._hold_time == HOLD_THRESHOLD:
                return ButtonEvent.HOLD
        elif self._hold_time:
            was_short = self._hold_time < HOLD_THRESHOLD
            self._hold_time = 0
            if was_short:
                return ButtonEvent.CLICK
        return ButtonEvent.NONE