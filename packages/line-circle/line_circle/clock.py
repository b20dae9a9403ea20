"""Clock for fixed-period ticking."""
from __future__ import annotations

from line_circle.types import ConfigurationError


class Clock:
    def __init__(self, period: float) -> None:
        if period <= 0:
            raise ConfigurationError("period must be positive")
        self._period = period
        self._tick_number = 0

    @property
    def period(self) -> float:
        """Milliseconds between ticks."""
        return self._period

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number
