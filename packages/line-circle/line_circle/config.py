"""Line-circle configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from line_circle import constants
from line_circle.types import ConfigurationError


@dataclass(frozen=True)
class LineCircleConfig:
    """Immutable configuration for a node chain and its renderer.

    Attributes:
        nodes: Number of nodes in the chain. Must be positive.
        step: Progress added per tick while a node animates.
        delay: Milliseconds between animator ticks.
        lines: Mirrored line lanes drawn per node.
        stroke_factor: Line width is ``min(width, height) / stroke_factor``.
        size_factor: Node size is ``gap / size_factor``.
        fore_color: Stroke and fill color for nodes.
        back_color: Background fill color.
    """

    nodes: int = constants.NODES
    step: float = constants.STEP
    delay: int = constants.DELAY
    lines: int = constants.LINES
    stroke_factor: float = constants.STROKE_FACTOR
    size_factor: float = constants.SIZE_FACTOR
    fore_color: str = constants.FORE_COLOR
    back_color: str = constants.BACK_COLOR

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.nodes <= 0:
            raise ConfigurationError("nodes must be positive")
        if self.step <= 0:
            raise ConfigurationError("step must be positive")
        if self.delay <= 0:
            raise ConfigurationError("delay must be positive")
        if self.lines <= 0:
            raise ConfigurationError("lines must be positive")
        if self.stroke_factor <= 0 or self.size_factor <= 0:
            raise ConfigurationError("stroke_factor and size_factor must be positive")
