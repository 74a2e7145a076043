# src/adamslib/corrector.py
"""
Adams-Moulton corrector solved by fixed-point iteration.

    y^(m+1) = y_i + h * divisor * (moulton[0] * f(x_{i+1}, y^(m)) + delta)
    delta   = sum_{j=1}^{k-1} moulton[j] * history[(k-2)-(j-1)]

``delta`` only involves known samples and is computed once per call. The
iteration starts from the predictor's estimate and stops as soon as two
successive iterates pass ``has_converged``.

Exhausting the budget is not an error: the outcome then carries
``converged=False`` and ``iterations_used = max_iterations + 1`` (one more
than was allowed), with the last iterate as ``value``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable
import numpy as np

from adamslib.convergence import has_converged
from adamslib.guards import (
    Derivative, eval_finite, require_budget, require_step_size, require_tolerance,
)
from adamslib.history import HistoryWindow
from adamslib.kernels import weighted_sum
from adamslib.orders.base import StepOrder
from adamslib.phases import StepPhase

__all__ = ["ConvergenceOutcome", "correct"]


@dataclass(frozen=True)
class ConvergenceOutcome:
    iterations_used: int
    value: float
    converged: bool


def correct(
    order: StepOrder,
    f: Derivative,
    y_prev: float,
    x_next: float,
    h: float,
    history: HistoryWindow,
    y_guess: float,
    epsilon: float,
    max_iterations: int,
    *,
    kernel: Callable[[np.ndarray, np.ndarray, int], float] = weighted_sum,
) -> ConvergenceOutcome:
    """
    Refine ``y_guess`` at ``x_next`` with the implicit Adams-Moulton formula.

    ``history`` must be the k-1 derivative samples ending at ``x_next - h``
    (the point of ``y_prev``); the unknown new point is not part of it.

    Raises:
        InvalidArgumentError: ``h == 0``, ``max_iterations < 1``, bad
            ``epsilon`` or a window of the wrong length.
        NumericDivergenceError: ``f`` returned NaN/Inf during the iteration.
    """
    h = require_step_size(h)
    max_iterations = require_budget(max_iterations)
    epsilon = require_tolerance(epsilon)
    history.require_order(order)

    delta = float(kernel(order.moulton_weights, history.values, 1))
    scale = h * order.divisor
    b0 = order.moulton[0]

    y_current = y_guess
    for i in range(max_iterations):
        slope = eval_finite(f, x_next, y_current, StepPhase.CORRECTING)
        y_next = y_prev + scale * (b0 * slope + delta)
        if has_converged(y_current, y_next, epsilon):
            return ConvergenceOutcome(iterations_used=i + 1, value=y_next, converged=True)
        y_current = y_next

    return ConvergenceOutcome(
        iterations_used=max_iterations + 1, value=y_current, converged=False,
    )
