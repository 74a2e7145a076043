# tests/orders/test_adams_accuracy.py
"""
Accuracy of the predictor-corrector on y' = y (y = e^x), started from exact
samples at x = 0, h, ..., (k-1)h.

Tests verify:
- global error shrinks with h at a rate consistent with the order
- order 20 beats order 16 beats order 12 on the same interval
- JIT on/off parity over a whole run
"""
from __future__ import annotations
import math

import numpy as np
import pytest

from adamslib import bootstrap_history, get_order, step

EPSILON = 1e-14
MAX_ITERATIONS = 50


def growth(x, y):
    return y


def integrate(name: str, h: float, x_end: float, *, jit: bool = False):
    """Return (x, y, y_exact, all_converged) after stepping from (k-1)h to x_end."""
    order = get_order(name)
    ys = [math.exp(j * h) for j in range(order.k)]
    history = bootstrap_history(order, growth, ys[:-1], 0.0, h)
    x = (order.k - 1) * h
    y = ys[-1]
    converged = True
    for _ in range(int(round((x_end - x) / h))):
        result = step(order, growth, x, y, h, history, EPSILON, MAX_ITERATIONS, jit=jit)
        converged = converged and result.converged
        x, y, history = result.state.x, result.y_next, result.history
    return x, y, math.exp(x), converged


def global_error(name: str, h: float, x_end: float) -> float:
    x, y, exact, converged = integrate(name, h, x_end)
    assert converged, f"{name}: corrector did not converge at h={h}"
    assert x == pytest.approx(x_end)
    return abs(y - exact)


@pytest.mark.parametrize("name, k", [("adams2", 2), ("adams3", 3), ("adams4", 4)])
def test_low_order_convergence_rate(name, k):
    """Halving h divides the error by about 2**k."""
    err_h = global_error(name, 0.1, 2.0)
    err_h2 = global_error(name, 0.05, 2.0)
    observed = math.log2(err_h / err_h2)
    assert observed > k - 0.5, f"{name}: observed order {observed:.2f}"


@pytest.mark.parametrize("name", ["adams12", "adams16"])
def test_high_order_error_decreases_with_h(name):
    """
    High orders at h = 0.5 vs h = 0.25 on [0, 10]: the error ratio must be far
    beyond what a low-order method would give.
    """
    err_h = global_error(name, 0.5, 10.0)
    err_h2 = global_error(name, 0.25, 10.0)
    assert err_h2 < err_h
    observed = math.log2(err_h / err_h2)
    assert observed > 8.0, f"{name}: observed order {observed:.2f}"


def test_cross_order_consistency():
    """Same problem, same h, same end point: higher order, smaller error."""
    h = 0.4
    x_end = 12.0
    err12 = global_error("adams12", h, x_end)
    err16 = global_error("adams16", h, x_end)
    err20 = global_error("adams20", h, x_end)

    assert err20 < err16 < err12
    assert err16 < err12 / 10.0, f"adams16={err16}, adams12={err12}"
    assert err20 < err16 / 10.0, f"adams20={err20}, adams16={err16}"


@pytest.mark.parametrize("name", ["adams12", "adams16", "adams20"])
def test_relative_accuracy_at_moderate_step(name):
    x, y, exact, converged = integrate(name, 0.4, 12.0)
    assert converged
    assert abs(y - exact) / exact < 1e-6


@pytest.mark.parametrize("name", ["adams4", "adams12", "adams20"])
def test_jit_on_off_parity(name):
    """
    Guardrail: JIT on/off must produce identical trajectories for the same
    order + inputs.
    """
    x_no, y_no, _, _ = integrate(name, 0.4, 12.0, jit=False)
    x_jit, y_jit, _, _ = integrate(name, 0.4, 12.0, jit=True)
    assert x_jit == x_no
    np.testing.assert_allclose(y_jit, y_no, rtol=1e-14, atol=0.0)
