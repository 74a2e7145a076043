# src/adamslib/guards.py
from __future__ import annotations

import math
import numbers
from typing import Callable

from adamslib.errors import InvalidArgumentError, NumericDivergenceError

__all__ = [
    "allfinite_scalar", "eval_finite",
    "require_step_size", "require_tolerance", "require_budget",
]

Derivative = Callable[[float, float], float]


def allfinite_scalar(x: float) -> bool:
    return math.isfinite(x)


def eval_finite(f: Derivative, x: float, y: float, phase: str) -> float:
    """
    Evaluate ``f(x, y)`` and reject NaN/Inf results.

    Raises:
        NumericDivergenceError: if the value is not finite. ``phase`` is stored
            on the error so callers can tell where the trajectory broke.
    """
    value = float(f(x, y))
    if not allfinite_scalar(value):
        raise NumericDivergenceError(x, y, value, str(phase))
    return value


def _require_real(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(name, f"must be a real number, got {value!r}")
    return float(value)


def require_step_size(h: float) -> float:
    h = _require_real(h, "h")
    if not allfinite_scalar(h):
        raise InvalidArgumentError("h", f"step size must be finite, got {h!r}")
    if h == 0.0:
        raise InvalidArgumentError("h", "step size must be non-zero")
    return h


def require_tolerance(epsilon: float) -> float:
    epsilon = _require_real(epsilon, "epsilon")
    if not allfinite_scalar(epsilon) or epsilon < 0.0:
        raise InvalidArgumentError(
            "epsilon", f"tolerance must be finite and >= 0, got {epsilon!r}"
        )
    return epsilon


def require_budget(max_iterations: int) -> int:
    # bool is an int subclass; True would silently mean one iteration
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, numbers.Integral):
        raise InvalidArgumentError(
            "max_iterations", f"must be an integer, got {max_iterations!r}"
        )
    max_iterations = int(max_iterations)
    if max_iterations < 1:
        raise InvalidArgumentError(
            "max_iterations", f"corrector needs at least one iteration, got {max_iterations}"
        )
    return max_iterations
