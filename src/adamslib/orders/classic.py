# src/adamslib/orders/classic.py
"""
Low-order Adams pairs (k = 2, 3, 4).

    k = 2:  AB2  y_{n+1} = y_n + h/2  * (3 f_n - f_{n-1})
            AM   y_{n+1} = y_n + h/2  * (f_{n+1} + f_n)              (trapezoid)
    k = 3:  AB3  y_{n+1} = y_n + h/12 * (23 f_n - 16 f_{n-1} + 5 f_{n-2})
            AM2  y_{n+1} = y_n + h/12 * (5 f_{n+1} + 8 f_n - f_{n-1})
    k = 4:  AB4  y_{n+1} = y_n + h/24 * (55 f_n - 59 f_{n-1} + 37 f_{n-2} - 9 f_{n-3})
            AM3  y_{n+1} = y_n + h/24 * (9 f_{n+1} + 19 f_n - 5 f_{n-1} + f_{n-2})
"""
from __future__ import annotations

from .base import StepOrder

__all__ = ["ADAMS2", "ADAMS3", "ADAMS4"]

ADAMS2 = StepOrder.from_integers("adams2", (3, -1), (1, 1), 2, aliases=("abm2",))
ADAMS3 = StepOrder.from_integers("adams3", (23, -16, 5), (5, 8, -1), 12, aliases=("abm3",))
ADAMS4 = StepOrder.from_integers(
    "adams4", (55, -59, 37, -9), (9, 19, -5, 1), 24, aliases=("abm4",),
)


# Auto-register on module import
def _auto_register():
    from .registry import register
    for order in (ADAMS2, ADAMS3, ADAMS4):
        register(order)

_auto_register()
