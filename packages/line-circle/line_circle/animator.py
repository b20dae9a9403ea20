"""Animator - repeating tick loop with an idempotent start/stop lifecycle."""
from __future__ import annotations

import logging

from line_circle.constants import DELAY
from line_circle.scheduler import FrameScheduler, Scheduler
from line_circle.types import Callback, ConfigurationError

logger = logging.getLogger(__name__)


class Animator:
    def __init__(self, scheduler: Scheduler | None = None, period: float = DELAY) -> None:
        if period <= 0:
            raise ConfigurationError("period must be positive")
        self._scheduler: Scheduler = scheduler if scheduler is not None else FrameScheduler()
        self._period = period
        self._animated = False

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def period(self) -> float:
        return self._period

    @property
    def animated(self) -> bool:
        return self._animated

    def start(self, on_tick: Callback) -> None:
        if self._animated:
            return
        self._animated = True
        logger.debug("animator started")
        self._scheduler.start(self._period, on_tick)

    def stop(self) -> None:
        if not self._animated:
            return
        self._animated = False
        self._scheduler.stop()
        logger.debug("animator stopped")
