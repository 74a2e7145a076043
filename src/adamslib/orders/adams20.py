# src/adamslib/orders/adams20.py
"""
Adams-Bashforth 20-step predictor / Adams-Moulton 19-step corrector.

Several numerators exceed 2**53; each is rounded once to the nearest double
when the table is built.
"""
from __future__ import annotations

from .base import StepOrder

__all__ = ["ADAMS20"]

_BASHFORTH = (
    691668239157222107697,
    -5292843584961252933125,
    30349492858024727686755,
    -126346544855927856134295,
    399537307669842150996468,
    -991168450545135070835076,
    1971629028083798845750380,
    -3191065388846318679544380,
    4241614331208149947151790,
    -4654326468801478894406214,
    4222756879776354065593786,
    -3161821089800186539248210,
    1943018818982002395655620,
    -970350191086531368649620,
    387739787034699092364924,
    -121059601023985433003532,
    28462032496476316665705,
    -4740335757093710713245,
    498669220956647866875,
    -24919383499187492303,
)

_MOULTON = (
    24919383499187492303,
    193280569173472261637,
    -558160720115629395555,
    1941395668950986461335,
    -5612131802364455926260,
    13187185898439270330756,
    -25293146116627869170796,
    39878419226784442421820,
    -51970649453670274135470,
    56154678684618739939910,
    -50320851025594566473146,
    37297227252822858381906,
    -22726350407538133839300,
    11268210124987992327060,
    -4474886658024166985340,
    1389665263296211699212,
    -325187970422032795497,
    53935307402575440285,
    -5652892248087175675,
    281550972898020815,
)

_DENOMINATOR = 102181884343418880000

ADAMS20 = StepOrder.from_integers(
    "adams20", _BASHFORTH, _MOULTON, _DENOMINATOR, aliases=("abm20",),
)


# Auto-register on module import
def _auto_register():
    from .registry import register
    register(ADAMS20)

_auto_register()
