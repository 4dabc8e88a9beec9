"""Moving-window sum over the most recent samples."""

from __future__ import annotations

from typing import Any


class MovingSumFilter:
    """Keeps the sum of the last ``size`` samples, pre-filled with a default."""

    def __init__(self, size: int, default: Any = False) -> None:
        if size < 1:
            raise ValueError("filter size must be at least 1")
        self._values = [default] * size
        self._total = default * size
        self._next = 0

    def update(self, value: Any) -> None:
        """Replace the oldest sample with ``value``."""
        slot = self._next
        self._next = (slot + 1) % len(self._values)
        self._total -= self._values[slot]
        self._values[slot] = value
        self._total += value

    def sum(self) -> Any:
        return self._total