# src/adamslib/bootstrap.py
"""
Starting a multistep integration.

An order with k samples needs, before its first step at x_s:

  - y(x_s), the current value, and
  - the window f(x_s - (k-1)h, .) .. f(x_s - h, .)  (k-1 derivatives).

``bootstrap_history`` builds the window from k-1 known solution samples.
``starter_samples`` produces samples from a single initial value with a
one-step method, and ``start`` chains both: k samples at x0 .. x0+(k-1)h,
the first k-1 seed the window and the last one is the current value.
"""
from __future__ import annotations
from typing import List, Sequence, Tuple

from adamslib.errors import InvalidArgumentError
from adamslib.guards import Derivative, eval_finite, require_step_size
from adamslib.history import HistoryWindow
from adamslib.orders.base import StepOrder
from adamslib.stepper import IntegrationState

__all__ = ["bootstrap_history", "starter_samples", "start", "STARTERS"]

STARTERS = ("rk4", "heun")


def bootstrap_history(
    order: StepOrder,
    f: Derivative,
    y_samples: Sequence[float],
    x0: float,
    h: float,
) -> HistoryWindow:
    """
    Seed the derivative window from known samples ``y_samples[j] = y(x0 + j*h)``.

    Exactly k-1 samples are required; ``history[j] = f(x0 + j*h, y_samples[j])``
    is evaluated for j = 0 .. k-2 in that order.

    Raises:
        InvalidArgumentError: wrong number of samples or ``h == 0``.
        NumericDivergenceError: ``f`` returned NaN/Inf.
    """
    h = require_step_size(h)
    samples = [float(y) for y in y_samples]
    need = order.history_length
    if len(samples) != need:
        raise InvalidArgumentError(
            "y_samples",
            f"order '{order.name}' needs exactly {need} samples to seed its history; "
            f"got {len(samples)}",
        )

    values: List[float] = []
    for j, y in enumerate(samples):
        values.append(eval_finite(f, x0 + j * h, y, "bootstrap"))
    return HistoryWindow(values)


def starter_samples(
    f: Derivative,
    x0: float,
    y0: float,
    h: float,
    count: int,
    method: str = "rk4",
) -> List[float]:
    """
    Generate ``count`` samples y(x0 + j*h), j = 0 .. count-1, from ``y0``.

    Methods:
        "rk4":  classic 4th-order Runge-Kutta
                    k1 = f(x, y)
                    k2 = f(x + h/2, y + h/2 * k1)
                    k3 = f(x + h/2, y + h/2 * k2)
                    k4 = f(x + h, y + h * k3)
                    y' = y + h/6 * (k1 + 2*k2 + 2*k3 + k4)
        "heun": improved Euler (2nd order)
                    y* = y + h * f(x, y)
                    y' = y + h/2 * (f(x, y) + f(x + h, y*))
    """
    h = require_step_size(h)
    if method not in STARTERS:
        raise InvalidArgumentError(
            "method", f"unknown starter {method!r}; expected one of {', '.join(STARTERS)}"
        )
    if count < 1:
        raise InvalidArgumentError("count", f"must be >= 1, got {count}")

    ys = [float(y0)]
    for j in range(count - 1):
        x = x0 + j * h
        y = ys[-1]
        if method == "rk4":
            k1 = eval_finite(f, x, y, "starter")
            k2 = eval_finite(f, x + 0.5 * h, y + 0.5 * h * k1, "starter")
            k3 = eval_finite(f, x + 0.5 * h, y + 0.5 * h * k2, "starter")
            k4 = eval_finite(f, x + h, y + h * k3, "starter")
            ys.append(y + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4))
        else:
            k1 = eval_finite(f, x, y, "starter")
            y_stage = y + h * k1
            k2 = eval_finite(f, x + h, y_stage, "starter")
            ys.append(y + 0.5 * h * (k1 + k2))
    return ys


def start(
    order: StepOrder,
    f: Derivative,
    x0: float,
    y0: float,
    h: float,
    method: str = "rk4",
) -> Tuple[IntegrationState, HistoryWindow]:
    """
    Prepare a trajectory from a single initial value.

    Returns the state positioned at x0 + (k-1)*h (``y_prev`` is the sample
    one step before) and the window of derivatives at x0 .. x0 + (k-2)*h.
    """
    samples = starter_samples(f, x0, y0, h, order.k, method=method)
    history = bootstrap_history(order, f, samples[:-1], x0, h)
    state = IntegrationState(
        x=x0 + (order.k - 1) * h,
        y_prev=samples[-2],
        y_curr=samples[-1],
    )
    return state, history
