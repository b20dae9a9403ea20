"""Repeating-timer protocol and a host-pumped implementation."""
from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from line_circle.clock import Clock
from line_circle.types import Callback

logger = logging.getLogger(__name__)


@runtime_checkable
class Scheduler(Protocol):
    """A repeating timer owned by an Animator.

    ``start`` begins invoking ``callback`` every ``period`` milliseconds;
    ``stop`` cancels it. An Animator never starts a scheduler twice without
    stopping it in between.
    """

    def start(self, period: float, callback: Callback) -> None: ...
    def stop(self) -> None: ...


class FrameScheduler:
    """Fixed-timestep scheduler driven by elapsed time the host feeds in.

    The host calls ``advance`` once per frame with the milliseconds since the
    previous frame. Whole periods accumulated fire the callback, leftovers
    carry over to the next frame. Stopping from inside the callback discards
    the rest of the pump. With manual ``advance`` calls this doubles as a
    deterministic clock for tests.
    """

    def __init__(self) -> None:
        self._clock: Clock | None = None
        self._callback: Callback | None = None
        self._accumulator = 0.0

    @property
    def running(self) -> bool:
        return self._callback is not None

    @property
    def tick_number(self) -> int:
        """Ticks fired since the last ``start``; 0 when idle."""
        return self._clock.tick_number if self._clock is not None else 0

    def start(self, period: float, callback: Callback) -> None:
        self._clock = Clock(period)
        self._callback = callback
        self._accumulator = 0.0
        logger.debug("timer started, period=%sms", period)

    def stop(self) -> None:
        if self._clock is not None:
            logger.debug("timer stopped after %d ticks", self._clock.tick_number)
        self._clock = None
        self._callback = None
        self._accumulator = 0.0

    def advance(self, elapsed: float) -> int:
        """Feed ``elapsed`` milliseconds; return how many ticks fired."""
        clock = self._clock
        if clock is None:
            return 0
        self._accumulator += elapsed
        fired = 0
        while self._clock is clock and self._accumulator >= clock.period:
            self._accumulator -= clock.period
            clock.advance()
            fired += 1
            callback = self._callback
            if callback is not None:
                callback()
        return fired

    def fire(self) -> None:
        """Advance by exactly one period."""
        if self._clock is not None:
            self.advance(self._clock.period)
