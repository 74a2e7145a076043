# src/adamslib/kernels.py
"""
Linear-combination kernel shared by the Adams-Bashforth predictor and the
Adams-Moulton corrector.

Both formulas pair the coefficient table front-to-back with the derivative
samples back-to-front (newest sample first):

    acc = sum_{m} weights[first + m] * samples[last - m]

The predictor uses ``first = 0`` over k samples; the corrector uses
``first = 1`` over the k-1 history entries (``weights[0]`` belongs to the
unknown new point and is applied inside the iteration).

The same Python function is used for the numba build, so both variants
accumulate in the same order.
"""
from __future__ import annotations
from typing import Callable

import numpy as np
from numba import njit

__all__ = ["weighted_sum", "get_weighted_sum"]


def _weighted_sum_impl(weights: np.ndarray, samples: np.ndarray, first: int) -> float:
    acc = 0.0
    last = samples.size - 1
    for m in range(weights.size - first):
        acc += weights[first + m] * samples[last - m]
    return acc


_weighted_sum_py = _weighted_sum_impl
_weighted_sum_jit = njit(cache=False)(_weighted_sum_impl)

# Default binding for the function-level API (pure Python).
weighted_sum: Callable[[np.ndarray, np.ndarray, int], float] = _weighted_sum_py


def get_weighted_sum(jit: bool) -> Callable[[np.ndarray, np.ndarray, int], float]:
    """Select Python or numba implementation based on jit flag."""
    if jit:
        return _weighted_sum_jit
    return _weighted_sum_py
