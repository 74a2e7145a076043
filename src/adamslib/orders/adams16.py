# src/adamslib/orders/adams16.py
"""
Adams-Bashforth 16-step predictor / Adams-Moulton 15-step corrector.

Numerators over the common denominator 62768369664000.
"""
from __future__ import annotations

from .base import StepOrder

__all__ = ["ADAMS16"]

_BASHFORTH = (
    362555126427073,
    -2161567671248849,
    9622096909515337,
    -30607373860520569,
    72558117072259733,
    -131963191940828581,
    187463140112902893,
    -210020588912321949,
    186087544263596643,
    -129930094104237331,
    70724351582843483,
    -29417910911251819,
    9038571752734087,
    -1934443196892599,
    257650275915823,
    -16088129229375,
)

_MOULTON = (
    16088129229375,
    105145058757073,
    -230992163723849,
    612744541065337,
    -1326978663058069,
    2285168598349733,
    -3129453071993581,
    3414941728852893,
    -2966365730265699,
    2039345879546643,
    -1096355235402331,
    451403108933483,
    -137515713789319,
    29219384284087,
    -3867689367599,
    240208245823,
)

_DENOMINATOR = 62768369664000

ADAMS16 = StepOrder.from_integers(
    "adams16", _BASHFORTH, _MOULTON, _DENOMINATOR, aliases=("abm16",),
)


# Auto-register on module import
def _auto_register():
    from .registry import register
    register(ADAMS16)

_auto_register()
