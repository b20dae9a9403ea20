"""line-circle - A tap-driven line-to-circle node animation."""
from __future__ import annotations

from line_circle.animator import Animator
from line_circle.chain import Node, NodeChain
from line_circle.clock import Clock
from line_circle.config import LineCircleConfig
from line_circle.controller import Event, SequenceController
from line_circle.drawing import Canvas, draw_node, node_geometry
from line_circle.progress import ProgressState
from line_circle.scale import clamped_scale, phase_scale
from line_circle.scheduler import FrameScheduler, Scheduler
from line_circle.types import ConfigurationError, Direction

__all__ = [
    "Animator",
    "Canvas",
    "Clock",
    "ConfigurationError",
    "Direction",
    "Event",
    "FrameScheduler",
    "LineCircleConfig",
    "Node",
    "NodeChain",
    "ProgressState",
    "Scheduler",
    "SequenceController",
    "clamped_scale",
    "draw_node",
    "node_geometry",
    "phase_scale",
]
