# tests/unit/test_stepper.py
"""
One predictor-corrector step:

- phase wiring (predict over window + f_i, shift, correct)
- inputs are not mutated, outputs are fresh values
- determinism for bit-identical inputs
- convergence sentinel and argument validation
"""
from __future__ import annotations
import math

import numpy as np
import pytest

from adamslib import (
    ADAMS4, ADAMS12, HistoryWindow, IntegrationState, InvalidArgumentError,
    StepPhase, Stepper, bootstrap_history, default_config, predict, step, step_state,
)


def _decay(x, y):
    return -0.5 * y + math.sin(x)


def _exact_window(order, f, h, x0=0.0):
    ys = [math.exp(-0.5 * (x0 + j * h)) for j in range(order.k)]
    history = bootstrap_history(order, f, ys[:-1], x0, h)
    return history, x0 + (order.k - 1) * h, ys[-1]


def test_step_wiring():
    h = 0.1
    history, x, y = _exact_window(ADAMS4, _decay, h)
    before = history.values.copy()

    result = step(ADAMS4, _decay, x, y, h, history, 1e-13, 25)

    f_i = _decay(x, y)
    assert result.y_predicted == predict(ADAMS4, y, h, history.with_current(f_i))
    assert result.history == history.shift(f_i)
    assert result.history.newest == f_i
    assert result.state == IntegrationState(x=x + h, y_prev=y, y_curr=result.y_next)
    assert result.converged
    # input window is untouched
    np.testing.assert_array_equal(history.values, before)


def test_step_calls_f_once_plus_iterations():
    calls = []

    def f(x, y):
        calls.append((x, y))
        return _decay(x, y)

    h = 0.05
    history, x, y = _exact_window(ADAMS4, _decay, h)
    result = step(ADAMS4, f, x, y, h, history, 1e-13, 25)

    assert len(calls) == 1 + result.iterations_used
    assert calls[0] == (x, y)
    assert all(cx == x + h for cx, _ in calls[1:])


@pytest.mark.parametrize("jit", [False, True])
def test_step_is_deterministic(jit):
    h = 0.2
    history, x, y = _exact_window(ADAMS12, _decay, h)

    first = step(ADAMS12, _decay, x, y, h, history, 1e-12, 20, jit=jit)
    second = step(ADAMS12, _decay, x, y, h, history, 1e-12, 20, jit=jit)

    assert first.y_next == second.y_next
    assert first.y_predicted == second.y_predicted
    assert first.iterations_used == second.iterations_used
    assert first.history == second.history
    assert first.state == second.state


def test_step_sentinel_when_budget_exhausted():
    h = 0.1
    history, x, y = _exact_window(ADAMS12, _decay, h)

    result = step(ADAMS12, _decay, x, y, h, history, 0.0, 3)

    assert result.converged is False
    assert result.iterations_used == 4
    assert math.isfinite(result.y_next)
    # the step still advances
    assert result.state.x == x + h


def test_step_state_matches_step():
    h = 0.1
    history, x, y = _exact_window(ADAMS4, _decay, h)
    state = IntegrationState(x=x, y_prev=0.0, y_curr=y)

    a = step(ADAMS4, _decay, x, y, h, history, 1e-12, 10)
    b = step_state(ADAMS4, _decay, state, h, history, 1e-12, 10)
    assert a.y_next == b.y_next
    assert b.state.y_prev == y


@pytest.mark.parametrize("kwargs", [
    {"h": 0.0},
    {"h": float("nan")},
    {"max_iterations": 0},
    {"max_iterations": float("inf")},
    {"max_iterations": None},
    {"epsilon": -1.0},
])
def test_step_rejects_invalid_arguments(kwargs):
    history, x, y = _exact_window(ADAMS4, _decay, 0.1)
    args = {"h": 0.1, "epsilon": 1e-10, "max_iterations": 5}
    args.update(kwargs)
    calls = []

    def f(xx, yy):
        calls.append(xx)
        return _decay(xx, yy)

    with pytest.raises(InvalidArgumentError):
        step(ADAMS4, f, x, y, args["h"], history, args["epsilon"], args["max_iterations"])
    # preconditions are checked before any f evaluation
    assert calls == []


def test_step_rejects_window_of_other_order():
    history, x, y = _exact_window(ADAMS4, _decay, 0.1)
    with pytest.raises(InvalidArgumentError):
        step(ADAMS12, _decay, x, y, 0.1, history, 1e-10, 5)


def test_negative_step_integrates_backwards():
    h = -0.1
    history, x, y = _exact_window(ADAMS4, _decay, h, x0=1.0)
    result = step(ADAMS4, _decay, x, y, h, history, 1e-13, 25)
    assert result.state.x == pytest.approx(x - 0.1)


def test_stepper_binds_config():
    config = default_config(order="adams4", epsilon=1e-13, max_iterations=25)
    stepper = Stepper.from_config(config)
    assert stepper.order is ADAMS4
    assert stepper.jit is False

    h = 0.1
    history, x, y = _exact_window(ADAMS4, _decay, h)
    state = IntegrationState(x=x, y_prev=0.0, y_curr=y)

    via_stepper = stepper.step(_decay, state, h, history)
    via_function = step(ADAMS4, _decay, x, y, h, history, 1e-13, 25)
    assert via_stepper.y_next == via_function.y_next


def test_stepper_jit_override():
    stepper = Stepper("adams12", default_config(jit=False), jit=True)
    assert stepper.jit is True
    assert "adams12" in repr(stepper)


def test_step_phases_are_ordered():
    names = [p.value for p in StepPhase]
    assert names == [
        "idle", "evaluating_current", "predicting", "shifting_history", "correcting", "done",
    ]


def test_explicit_order_takes_precedence_over_config():
    config = default_config(order="adams16", epsilon=1e-9, max_iterations=4)
    stepper = Stepper("adams4", config)
    assert stepper.order is ADAMS4
    assert stepper.config is config
    assert Stepper.from_config(config).order.k == 16
