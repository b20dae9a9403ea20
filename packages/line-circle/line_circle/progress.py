"""Per-node progress state."""
from __future__ import annotations

import logging

from line_circle.constants import STEP
from line_circle.types import Callback, ConfigurationError, Direction

logger = logging.getLogger(__name__)


class ProgressState:
    """Progress of a single node between its two resting values, 0 and 1.

    ``checkpoint`` is the last resting value. While ``direction`` is 0 the
    state is idle and ``scale == checkpoint``.
    """

    def __init__(self, step: float = STEP) -> None:
        if step <= 0:
            raise ConfigurationError("step must be positive")
        self.step = step
        self.scale = 0.0
        self.direction: Direction = 0
        self.checkpoint = 0.0

    @property
    def is_idle(self) -> bool:
        return self.direction == 0

    def advance(self, on_phase_complete: Callback) -> None:
        """Move one step; snap and call ``on_phase_complete`` past a unit boundary."""
        if self.direction == 0:
            return
        self.scale += self.step * self.direction
        if abs(self.scale - self.checkpoint) > 1:
            self.scale = self.checkpoint + self.direction
            self.direction = 0
            self.checkpoint = self.scale
            logger.debug("progress settled at %s", self.scale)
            on_phase_complete()

    def start(self, on_started: Callback) -> None:
        """Head toward the opposite resting value. No-op while animating."""
        if self.direction != 0:
            return
        self.direction = 1 - 2 * int(self.checkpoint)
        on_started()

    def __repr__(self) -> str:
        return (
            f"ProgressState(scale={self.scale!r}, direction={self.direction!r}, "
            f"checkpoint={self.checkpoint!r})"
        )
