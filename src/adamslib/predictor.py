# src/adamslib/predictor.py
"""
Adams-Bashforth predictor (explicit, k samples):

    y_pred = y_i + h * divisor * sum_{j=0}^{k-1} bashforth[j] * sample[k-1-j]

``sample`` is ordered oldest -> newest, the newest being f(x_i, y_i).
"""
from __future__ import annotations
from typing import Callable, Sequence
import numpy as np

from adamslib.guards import require_step_size
from adamslib.kernels import weighted_sum
from adamslib.orders.base import StepOrder
from adamslib.utils.arrays import as_float_vector, require_len

__all__ = ["predict"]


def predict(
    order: StepOrder,
    y: float,
    h: float,
    samples: Sequence[float] | np.ndarray,
    *,
    kernel: Callable[[np.ndarray, np.ndarray, int], float] = weighted_sum,
) -> float:
    """
    Explicit estimate of y(x_i + h) from the k most recent derivative samples.

    Raises:
        InvalidArgumentError: if ``h == 0`` or ``samples`` does not hold exactly
            k values.
    """
    h = require_step_size(h)
    if isinstance(samples, np.ndarray) and samples.dtype == np.float64 and samples.ndim == 1:
        s = samples
    else:
        s = as_float_vector(samples, "samples")
    require_len(s, order.k, "samples")

    delta = float(kernel(order.bashforth_weights, s, 0))
    return y + h * order.divisor * delta
