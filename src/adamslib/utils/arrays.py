# src/adamslib/utils/arrays.py
from __future__ import annotations
from typing import Any
import numpy as np

from adamslib.errors import InvalidArgumentError

__all__ = [
    "as_float_vector", "require_len", "frozen_copy",
]

def as_float_vector(values: Any, name: str = "array") -> np.ndarray:
    """
    Copy 'values' into a new 1D C-contiguous float64 array.
    Raise InvalidArgumentError if the input is not one-dimensional.
    (Guard only; not for hot loops.)
    """
    try:
        a = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(name, f"must be a sequence of floats ({exc})") from exc
    if a.ndim != 1:
        raise InvalidArgumentError(name, f"must be one-dimensional; got shape {a.shape}")
    return a

def require_len(a: np.ndarray, length: int, name: str = "array") -> np.ndarray:
    """
    Ensure 'a' has exactly 'length' entries. Raise InvalidArgumentError if not.
    """
    if a.size != length:
        raise InvalidArgumentError(name, f"expected {length} entries; got {a.size}")
    return a

def frozen_copy(values: Any, name: str = "array") -> np.ndarray:
    """
    Return a read-only float64 copy of 'values'. Writes through the
    returned array raise ValueError.
    """
    a = as_float_vector(values, name)
    a.flags.writeable = False
    return a
