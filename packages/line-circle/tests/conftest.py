"""Shared fixtures for line-circle tests."""
from __future__ import annotations

import pytest

from line_circle import Animator, FrameScheduler, LineCircleConfig, SequenceController


class RecordingCanvas:
    """Canvas fake that records every drawing call in order."""

    def __init__(self, width: float = 600.0, height: float = 400.0) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []
        self.depth = 0

    def fill_background(self, color: str) -> None:
        self.calls.append(("fill_background", color))

    def save(self) -> None:
        self.depth += 1
        self.calls.append(("save",))

    def restore(self) -> None:
        self.depth -= 1
        self.calls.append(("restore",))

    def translate(self, x: float, y: float) -> None:
        self.calls.append(("translate", x, y))

    def scale(self, sx: float, sy: float) -> None:
        self.calls.append(("scale", sx, sy))

    def set_stroke_style(self, color: str) -> None:
        self.calls.append(("stroke_style", color))

    def set_fill_style(self, color: str) -> None:
        self.calls.append(("fill_style", color))

    def set_line_width(self, width: float) -> None:
        self.calls.append(("line_width", width))

    def set_line_cap(self, cap: str) -> None:
        self.calls.append(("line_cap", cap))

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.calls.append(("line", x0, y0, x1, y1))

    def fill_circle(self, x: float, y: float, radius: float) -> None:
        self.calls.append(("circle", x, y, radius))

    def named(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


class Harness:
    """Controller wired to a manual FrameScheduler, counting render requests."""

    def __init__(self, config: LineCircleConfig) -> None:
        self.scheduler = FrameScheduler()
        self.renders = 0
        self.controller = SequenceController(
            config,
            Animator(self.scheduler, period=config.delay),
            request_render=self._on_render,
        )

    def _on_render(self) -> None:
        self.renders += 1

    def run_sweep(self, limit: int = 1000) -> int:
        """Tap, then fire ticks until the animator stops. Returns ticks fired."""
        self.controller.tap()
        ticks = 0
        while self.controller.state == "running":
            self.scheduler.fire()
            ticks += 1
            if ticks > limit:
                raise AssertionError("sweep never completed")
        return ticks


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def make_canvas():
    return RecordingCanvas


@pytest.fixture
def harness() -> Harness:
    return Harness(LineCircleConfig())


@pytest.fixture
def fast_harness() -> Harness:
    """Five nodes stepping 0.25 per tick: every sweep takes exactly 5 ticks."""
    return Harness(LineCircleConfig(step=0.25))


@pytest.fixture
def make_harness():
    def _make(**overrides) -> Harness:
        return Harness(LineCircleConfig(**overrides))

    return _make
