# src/adamslib/orders/adams12.py
"""
Adams-Bashforth 12-step predictor / Adams-Moulton 11-step corrector.

Order 12 predictor, order 12 corrector. Numerators over the common
denominator 958003200; bashforth[0] weights the newest sample.
"""
from __future__ import annotations

from .base import StepOrder

__all__ = ["ADAMS12"]

_BASHFORTH = (
    4527766399,
    -19433810163,
    61633227185,
    -135579356757,
    214139355366,
    -247741639374,
    211103573298,
    -131365867290,
    58189107627,
    -17410248271,
    3158642445,
    -262747265,
)

_MOULTON = (
    262747265,
    1374799219,
    -2092490673,
    3828828885,
    -5519460582,
    6043521486,
    -4963166514,
    3007739418,
    -1305971115,
    384709327,
    -68928781,
    5675265,
)

_DENOMINATOR = 958003200

ADAMS12 = StepOrder.from_integers(
    "adams12", _BASHFORTH, _MOULTON, _DENOMINATOR, aliases=("abm12",),
)


# Auto-register on module import
def _auto_register():
    from .registry import register
    register(ADAMS12)

_auto_register()
