# src/adamslib/history.py
"""
Sliding window of past derivative evaluations.

Layout (k = number of samples of the order, window holds k-1 of them):

    index 0    : f(x_{i-k+1}, y_{i-k+1})   oldest
    ...
    index k-2  : f(x_{i-1}, y_{i-1})       newest

A window is a value: ``shift`` returns a new window and the backing array is
read-only, so a window handed to ``step`` is never modified behind the
caller's back.
"""
from __future__ import annotations
from typing import Iterator, Sequence
import numpy as np

from adamslib.errors import InvalidArgumentError
from adamslib.orders.base import StepOrder
from adamslib.utils.arrays import as_float_vector

__all__ = ["HistoryWindow"]


class HistoryWindow:
    __slots__ = ("_values",)

    def __init__(self, values: Sequence[float] | np.ndarray):
        arr = as_float_vector(values, "history")
        if arr.size < 1:
            raise InvalidArgumentError("history", "window must hold at least one sample")
        arr.flags.writeable = False
        self._values = arr

    @classmethod
    def _adopt(cls, arr: np.ndarray) -> "HistoryWindow":
        # arr must be a fresh float64 array owned by the caller
        arr.flags.writeable = False
        window = cls.__new__(cls)
        window._values = arr
        return window

    @property
    def values(self) -> np.ndarray:
        """Read-only float64 array, oldest first."""
        return self._values

    @property
    def newest(self) -> float:
        return float(self._values[-1])

    @property
    def oldest(self) -> float:
        return float(self._values[0])

    def __len__(self) -> int:
        return self._values.size

    def __getitem__(self, index):
        return self._values[index]

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistoryWindow):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HistoryWindow({self._values.tolist()!r})"

    def shift(self, value: float) -> "HistoryWindow":
        """
        Return a new window with ``value`` appended as the newest entry and
        the oldest entry evicted. Length is unchanged.
        """
        n = self._values.size
        out = np.empty(n, dtype=np.float64)
        out[: n - 1] = self._values[1:]
        out[n - 1] = value
        return HistoryWindow._adopt(out)

    def with_current(self, value: float) -> np.ndarray:
        """
        The window followed by ``value``: the full sample set (oldest first)
        consumed by the Adams-Bashforth predictor. The window is unchanged.
        """
        n = self._values.size
        out = np.empty(n + 1, dtype=np.float64)
        out[:n] = self._values
        out[n] = value
        return out

    def require_order(self, order: StepOrder) -> "HistoryWindow":
        """Raise InvalidArgumentError unless the window holds k-1 samples."""
        if self._values.size != order.history_length:
            raise InvalidArgumentError(
                "history",
                f"order '{order.name}' needs {order.history_length} samples; "
                f"window holds {self._values.size}",
            )
        return self
