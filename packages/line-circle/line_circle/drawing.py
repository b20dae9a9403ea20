"""Canvas protocol and the per-node line-to-circle drawing."""
from __future__ import annotations

from typing import Protocol

from line_circle.config import LineCircleConfig
from line_circle.scale import phase_scale
from line_circle.types import ConfigurationError


class Canvas(Protocol):
    """Immediate-mode 2D drawing surface with a save/restore transform stack."""

    @property
    def width(self) -> float: ...
    @property
    def height(self) -> float: ...
    def fill_background(self, color: str) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, x: float, y: float) -> None: ...
    def scale(self, sx: float, sy: float) -> None: ...
    def set_stroke_style(self, color: str) -> None: ...
    def set_fill_style(self, color: str) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def set_line_cap(self, cap: str) -> None: ...
    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None: ...
    def fill_circle(self, x: float, y: float, radius: float) -> None: ...


def node_geometry(canvas: Canvas, index: int, config: LineCircleConfig) -> tuple[float, float, float]:
    """Return ``(x, y, size)`` for node ``index``: slot center and arm length."""
    if canvas.width <= 0 or canvas.height <= 0:
        raise ConfigurationError("canvas width and height must be positive")
    gap = canvas.width / (config.nodes + 1)
    size = gap / config.size_factor
    return gap * (index + 1), canvas.height / 2, size


def draw_node(canvas: Canvas, index: int, scale: float, config: LineCircleConfig) -> None:
    """Draw one node at progress ``scale``.

    Phase 0 retracts the mirrored lines toward the center, phase 1 grows
    the circle.
    """
    sc0 = phase_scale(scale, 0, 2)
    sc1 = phase_scale(scale, 1, 2)
    x, y, size = node_geometry(canvas, index, config)
    canvas.set_line_width(min(canvas.width, canvas.height) / config.stroke_factor)
    canvas.set_line_cap("round")
    canvas.set_stroke_style(config.fore_color)
    canvas.set_fill_style(config.fore_color)
    canvas.save()
    canvas.translate(x, y)
    for lane in range(config.lines):
        canvas.save()
        canvas.scale(1, 1 - 2 * (lane % 2))
        canvas.draw_line(0, -size, 0, -size * sc0)
        canvas.restore()
    canvas.fill_circle(0, 0, size * sc1 / 2)
    canvas.restore()
