# tests/unit/test_convergence.py
"""
Mixed absolute/relative stopping test of the corrector.
"""
from __future__ import annotations

import pytest

from adamslib import has_converged

EPS = 1e-6


def test_relative_branch_when_both_magnitudes_exceed_one():
    assert has_converged(1.5, 1.5 + 0.5 * EPS, EPS)
    # difference of 5e-5 only passes because the tolerance is scaled by |y1|
    assert has_converged(100.0, 100.0 + 50 * EPS, EPS)
    assert not has_converged(100.0, 100.0 + 200 * EPS, EPS)


def test_absolute_branch_for_small_magnitudes():
    assert has_converged(0.5, 0.5 + 0.5 * EPS, EPS)
    assert not has_converged(0.5, 0.5 + 2 * EPS, EPS)


def test_magnitude_exactly_one_uses_absolute_branch():
    assert not has_converged(1.0, 1.0 + 2 * EPS, EPS)
    assert not has_converged(-1.0, -1.0 - 2 * EPS, EPS)
    # |y0| == 1: tolerance stays absolute even though |y1| is large
    assert not has_converged(1.0, 1.5, 0.4)
    assert has_converged(1.0001, 1.5, 0.4)


def test_one_side_small_falls_back_to_absolute():
    # |y0| > 1 but |y1| <= 1
    assert not has_converged(1.2, 0.9, 0.25)
    assert has_converged(1.1, 0.9, 0.25)


@pytest.mark.parametrize("y0, y1", [(-3.0, -3.0), (0.0, 0.0), (7.5, 7.5)])
def test_zero_tolerance_never_converges(y0, y1):
    # strict '<': identical iterates do not pass a zero tolerance
    assert not has_converged(y0, y1, 0.0)


def test_negative_values_use_magnitudes():
    assert has_converged(-50.0, -50.0 - 25 * EPS, EPS)
