"""Shared type aliases and errors for line-circle."""
from __future__ import annotations

from typing import Callable, Literal

Direction = Literal[-1, 0, 1]
Callback = Callable[[], None]


class ConfigurationError(ValueError):
    """Raised when the chain, progress step, or timer period is invalid."""
