# src/adamslib/orders/registry.py
from __future__ import annotations
from typing import Dict, List, Union

from .base import StepOrder

__all__ = ["register", "get_order", "registry", "list_orders"]

# name -> order instance
_registry: Dict[str, StepOrder] = {}

def register(order: StepOrder) -> None:
    """
    Register an order by its name and aliases.
    Enforces uniqueness of the canonical name; aliases may overlap only
    if they point to the same order instance.
    """
    name = order.name
    if name in _registry and _registry[name] is not order:
        raise ValueError(f"Order '{name}' already registered with a different table.")
    _registry[name] = order

    for alias in order.aliases:
        if alias in _registry and _registry[alias] is not order:
            raise ValueError(f"Alias '{alias}' already registered for a different table.")
        _registry[alias] = order

def get_order(key: Union[str, int]) -> StepOrder:
    """
    Return the registered order for a name, an alias, or the number of
    samples k (``12`` -> ``"adams12"``). Raise KeyError if unknown.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        key = f"adams{key}"
    return _registry[key]

def registry() -> Dict[str, StepOrder]:
    """
    Read-only-ish view (do not mutate externally).
    """
    return dict(_registry)

def list_orders() -> List[str]:
    """
    Canonical order names (aliases excluded), sorted by k.
    """
    canonical = {o.name: o for o in _registry.values()}
    return [name for name, _ in sorted(canonical.items(), key=lambda item: (item[1].k, item[0]))]
