"""pygame-backed Canvas with a translate/scale transform stack."""
from __future__ import annotations

import pygame


class PygameCanvas:
    """Immediate-mode canvas over a pygame Surface.

    pygame has no transform stack, so points are mapped through an affine
    ``(tx, ty, sx, sy)`` kept here. Round line caps are drawn as end circles.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._transform = (0.0, 0.0, 1.0, 1.0)
        self._stack: list[tuple[float, float, float, float]] = []
        self._stroke = pygame.Color(0, 0, 0)
        self._fill = pygame.Color(0, 0, 0)
        self._line_width = 1.0
        self._line_cap = "butt"

    @property
    def width(self) -> float:
        return self._surface.get_width()

    @property
    def height(self) -> float:
        return self._surface.get_height()

    def fill_background(self, color: str) -> None:
        self._surface.fill(pygame.Color(color))

    def save(self) -> None:
        self._stack.append(self._transform)

    def restore(self) -> None:
        if self._stack:
            self._transform = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        tx, ty, sx, sy = self._transform
        self._transform = (tx + x * sx, ty + y * sy, sx, sy)

    def scale(self, sx: float, sy: float) -> None:
        tx, ty, csx, csy = self._transform
        self._transform = (tx, ty, csx * sx, csy * sy)

    def set_stroke_style(self, color: str) -> None:
        self._stroke = pygame.Color(color)

    def set_fill_style(self, color: str) -> None:
        self._fill = pygame.Color(color)

    def set_line_width(self, width: float) -> None:
        self._line_width = width

    def set_line_cap(self, cap: str) -> None:
        self._line_cap = cap

    def _map(self, x: float, y: float) -> tuple[float, float]:
        tx, ty, sx, sy = self._transform
        return tx + x * sx, ty + y * sy

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        start = self._map(x0, y0)
        end = self._map(x1, y1)
        width = max(1, round(self._line_width))
        pygame.draw.line(self._surface, self._stroke, start, end, width)
        if self._line_cap == "round":
            cap_r = self._line_width / 2
            pygame.draw.circle(self._surface, self._stroke, start, cap_r)
            pygame.draw.circle(self._surface, self._stroke, end, cap_r)

    def fill_circle(self, x: float, y: float, radius: float) -> None:
        _tx, _ty, sx, _sy = self._transform
        r = radius * abs(sx)
        if r < 0.5:
            return
        pygame.draw.circle(self._surface, self._fill, self._map(x, y), r)
