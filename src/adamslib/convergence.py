# src/adamslib/convergence.py
from __future__ import annotations

__all__ = ["has_converged"]


def has_converged(y0: float, y1: float, epsilon: float) -> bool:
    """
    Mixed absolute/relative stopping test for the corrector iteration.

    If both ``|y0|`` and ``|y1|`` exceed 1 the tolerance is scaled by ``|y1|``
    (relative test), otherwise ``epsilon`` is used as is (absolute test).
    A magnitude of exactly 1.0 takes the absolute branch.

    Returns True iff ``|y0 - y1| < effective tolerance``.
    """
    if abs(y0) > 1.0 and abs(y1) > 1.0:
        epsilon *= abs(y1)
    return abs(y0 - y1) < epsilon
