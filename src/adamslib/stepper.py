# src/adamslib/stepper.py
"""
One predictor-corrector step.

Phases of a step (see ``StepPhase``):

  1. EVALUATING_CURRENT: f_i = f(x_i, y_i)                (one f call)
  2. PREDICTING:         Adams-Bashforth over [window..., f_i]
  3. SHIFTING_HISTORY:   window' = window.shift(f_i)
                         -> derivatives at x_{i-k+2} .. x_i
  4. CORRECTING:         Adams-Moulton iteration from the prediction
                         (up to max_iterations f calls)
  5. DONE:               state' = (x_i + h, y_i, y_{i+1})

Inputs are never mutated; the updated window and state come back in the
``StepResult``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Union
import numpy as np

from adamslib.config import IntegratorConfig, default_config
from adamslib.corrector import correct
from adamslib.guards import (
    Derivative, eval_finite, require_budget, require_step_size, require_tolerance,
)
from adamslib.history import HistoryWindow
from adamslib.kernels import get_weighted_sum
from adamslib.orders.base import StepOrder
from adamslib.orders.registry import get_order
from adamslib.phases import StepPhase
from adamslib.predictor import predict

__all__ = ["IntegrationState", "StepResult", "step", "step_state", "Stepper"]


@dataclass(frozen=True)
class IntegrationState:
    """The two most recent solution samples; ``x`` is the abscissa of ``y_curr``."""
    x: float
    y_prev: float
    y_curr: float

    def advance(self, h: float, y_next: float) -> "IntegrationState":
        return IntegrationState(x=self.x + h, y_prev=self.y_curr, y_curr=y_next)


@dataclass(frozen=True)
class StepResult:
    y_next: float
    y_predicted: float        # Adams-Bashforth estimate the corrector started from
    iterations_used: int      # max_iterations + 1 when not converged
    converged: bool
    history: HistoryWindow    # window ending at the start point of the step
    state: IntegrationState


def _run_step(
    order: StepOrder,
    f: Derivative,
    x_i: float,
    y_i: float,
    h: float,
    history: HistoryWindow,
    epsilon: float,
    max_iterations: int,
    kernel: Callable[[np.ndarray, np.ndarray, int], float],
) -> StepResult:
    h = require_step_size(h)
    epsilon = require_tolerance(epsilon)
    max_iterations = require_budget(max_iterations)
    history.require_order(order)

    f_i = eval_finite(f, x_i, y_i, StepPhase.EVALUATING_CURRENT)
    y_predicted = predict(order, y_i, h, history.with_current(f_i), kernel=kernel)
    shifted = history.shift(f_i)

    x_next = x_i + h
    outcome = correct(
        order, f, y_i, x_next, h, shifted, y_predicted, epsilon, max_iterations,
        kernel=kernel,
    )
    return StepResult(
        y_next=outcome.value,
        y_predicted=y_predicted,
        iterations_used=outcome.iterations_used,
        converged=outcome.converged,
        history=shifted,
        state=IntegrationState(x=x_next, y_prev=y_i, y_curr=outcome.value),
    )


def step(
    order: StepOrder,
    f: Derivative,
    x_i: float,
    y_i: float,
    h: float,
    history: HistoryWindow,
    epsilon: float,
    max_iterations: int,
    *,
    jit: bool = False,
) -> StepResult:
    """
    Advance y(x_i) = y_i to x_i + h with the predictor-corrector pair of ``order``.

    Parameters:
        order: Coefficient tables (k samples).
        f: Derivative callable ``f(x, y) -> float``.
        x_i, y_i: Current point.
        h: Step size (non-zero; negative integrates backwards).
        history: The k-1 derivative samples at x_i - (k-1)h .. x_i - h.
        epsilon: Corrector tolerance (>= 0).
        max_iterations: Corrector budget (>= 1).
        jit: Use the numba-compiled combination kernel.

    Returns:
        StepResult with the corrected value, the predictor's estimate,
        the iteration count, the converged flag, and the updated window/state.

    Raises:
        InvalidArgumentError: for invalid ``h``, ``epsilon``, ``max_iterations``
            or a window that does not match the order.
        NumericDivergenceError: if ``f`` returns NaN/Inf.
    """
    return _run_step(
        order, f, x_i, y_i, h, history, epsilon, max_iterations, get_weighted_sum(jit),
    )


def step_state(
    order: StepOrder,
    f: Derivative,
    state: IntegrationState,
    h: float,
    history: HistoryWindow,
    epsilon: float,
    max_iterations: int,
    *,
    jit: bool = False,
) -> StepResult:
    """Same as ``step`` with the current point taken from ``state``."""
    return step(
        order, f, state.x, state.y_curr, h, history, epsilon, max_iterations, jit=jit,
    )


class Stepper:
    """
    An order bound to a corrector configuration and a kernel variant.

    Holds no per-trajectory data, so one Stepper can serve any number of
    trajectories (each passing its own state and window).

    ``order`` takes precedence over ``config.order``; the config then only
    supplies epsilon, max_iterations and the jit default. Use
    ``Stepper.from_config`` to take the order from the config.
    """
    def __init__(
        self,
        order: Union[StepOrder, str, int],
        config: Optional[IntegratorConfig] = None,
        *,
        jit: Optional[bool] = None,
    ):
        if not isinstance(order, StepOrder):
            order = get_order(order)
        self.order = order
        self.config = config if config is not None else default_config()
        self.jit = self.config.jit if jit is None else bool(jit)
        self._kernel = get_weighted_sum(self.jit)

    @classmethod
    def from_config(cls, config: IntegratorConfig) -> "Stepper":
        """Build a Stepper for ``config.order``."""
        return cls(config.order, config)

    def __repr__(self) -> str:
        return (
            f"Stepper(order={self.order.name!r}, epsilon={self.config.epsilon!r}, "
            f"max_iterations={self.config.max_iterations!r}, jit={self.jit!r})"
        )

    def step(
        self,
        f: Derivative,
        state: IntegrationState,
        h: float,
        history: HistoryWindow,
    ) -> StepResult:
        return _run_step(
            self.order, f, state.x, state.y_curr, h, history,
            self.config.epsilon, self.config.max_iterations, self._kernel,
        )
