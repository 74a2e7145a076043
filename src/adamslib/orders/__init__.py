# src/adamslib/orders/__init__.py
from .base import StepOrder
from .registry import register, get_order, registry, list_orders

# Import concrete tables to trigger auto-registration
from .classic import ADAMS2, ADAMS3, ADAMS4
from .adams12 import ADAMS12
from .adams16 import ADAMS16
from .adams20 import ADAMS20

__all__ = [
    "StepOrder",
    "register", "get_order", "registry", "list_orders",
    "ADAMS2", "ADAMS3", "ADAMS4", "ADAMS12", "ADAMS16", "ADAMS20",
]
