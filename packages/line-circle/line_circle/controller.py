"""SequenceController - tap/tick state machine over a NodeChain."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from line_circle.animator import Animator
from line_circle.chain import NodeChain
from line_circle.config import LineCircleConfig
from line_circle.types import Callback, Direction

if TYPE_CHECKING:
    from line_circle.drawing import Canvas
    from line_circle.progress import ProgressState

logger = logging.getLogger(__name__)


class Event(Enum):
    TAP = "tap"
    TICK = "tick"


def _no_render() -> None:
    pass


class SequenceController:
    """Animates one node at a time, moving the cursor after each sweep.

    ``request_render`` is called after a sweep starts and after it completes;
    the host answers it by repainting with ``render``.
    """

    def __init__(
        self,
        config: LineCircleConfig | None = None,
        animator: Animator | None = None,
        request_render: Callback = _no_render,
    ) -> None:
        self.config = config if config is not None else LineCircleConfig()
        self.chain = NodeChain(self.config.nodes, self.config.step)
        self.animator = animator if animator is not None else Animator(period=self.config.delay)
        self.request_render = request_render
        self.cursor = 0
        self.direction: Direction = 1

    @property
    def current(self) -> ProgressState:
        return self.chain[self.cursor].progress

    @property
    def state(self) -> str:
        return "running" if self.animator.animated else "idle"

    def dispatch(self, event: Event) -> None:
        if event is Event.TAP:
            self._on_tap()
        elif event is Event.TICK:
            self._on_tick()
        else:
            raise ValueError(f"Unknown event {event!r}")

    def tap(self) -> None:
        self.dispatch(Event.TAP)

    def tick(self) -> None:
        self.dispatch(Event.TICK)

    def _on_tap(self) -> None:
        if self.current.is_idle:
            self.current.start(self._on_started)
        elif not self.animator.animated:
            # sweep was stopped mid-way; pick it up where it froze
            logger.info("sweep resumed: node=%d", self.cursor)
            self.request_render()
            self.animator.start(self.tick)

    def _on_started(self) -> None:
        logger.info(
            "sweep started: node=%d direction=%+d", self.cursor, self.current.direction,
        )
        self.request_render()
        self.animator.start(self.tick)

    def _on_tick(self) -> None:
        self.current.advance(self._on_complete)

    def _on_complete(self) -> None:
        finished = self.cursor
        self.cursor = self.chain.get_next(self.cursor, self.direction, self._on_exhausted)
        logger.info("sweep complete: node=%d cursor=%d", finished, self.cursor)
        self.animator.stop()
        self.request_render()

    def _on_exhausted(self) -> None:
        self.direction = -self.direction
        logger.info("chain boundary reached, direction now %+d", self.direction)

    def draw(self, canvas: Canvas) -> None:
        self.chain.draw(canvas, self.cursor, self.config)

    def render(self, canvas: Canvas) -> None:
        """Full repaint: background, then the chain from the cursor down."""
        canvas.fill_background(self.config.back_color)
        self.draw(canvas)
