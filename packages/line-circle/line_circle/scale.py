"""Scale math splitting one progress value into sequential phases."""
from __future__ import annotations


def clamped_scale(scale: float, i: int, n: int) -> float:
    """Portion of ``scale`` left once the first ``i`` of ``n`` phases are spent."""
    return max(0.0, scale - i / n)


def phase_scale(scale: float, i: int, n: int) -> float:
    """Progress of phase ``i`` out of ``n``, normalized to ``[0, 1]``.

    Phase ``i`` saturates at ``scale == (i + 1) / n``, so with ``n == 2`` a
    single sweep 0 -> 1 runs phase 0 to completion before phase 1 begins.
    """
    return min(1.0 / n, clamped_scale(scale, i, n)) * n
