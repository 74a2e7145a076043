# src/adamslib/orders/base.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence, Tuple
import math
import numpy as np

from adamslib.errors import InvalidArgumentError
from adamslib.utils.arrays import frozen_copy

__all__ = ["StepOrder"]


@dataclass(frozen=True)
class StepOrder:
    """
    One fixed-order Adams-Bashforth / Adams-Moulton pair.

    Weights used by the formulas are ``divisor * bashforth[j]`` and
    ``divisor * moulton[j]``:

      - ``bashforth[0]`` multiplies the newest sample f(x_i, y_i),
        ``bashforth[k-1]`` the oldest f(x_{i-k+1}, y_{i-k+1}).
      - ``moulton[0]`` multiplies the unknown f(x_{i+1}, y_{i+1}),
        ``moulton[j]`` (j >= 1) multiplies f(x_{i+1-j}, y_{i+1-j}).

    Instances are immutable and may be shared by any number of trajectories.
    Adding a new order means building one of these, nothing else.
    """
    name: str
    k: int
    bashforth: Tuple[float, ...]
    moulton: Tuple[float, ...]
    divisor: float
    aliases: Tuple[str, ...] = ()
    # Read-only float64 views of the tables for the kernels
    bashforth_weights: np.ndarray = field(init=False, repr=False, compare=False)
    moulton_weights: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.k, bool) or not isinstance(self.k, int) or self.k < 2:
            raise InvalidArgumentError("k", f"order must be an integer >= 2, got {self.k!r}")

        bashforth = tuple(float(c) for c in self.bashforth)
        moulton = tuple(float(c) for c in self.moulton)
        if len(bashforth) != self.k:
            raise InvalidArgumentError(
                "bashforth", f"expected {self.k} coefficients for '{self.name}', got {len(bashforth)}"
            )
        if len(moulton) != self.k:
            raise InvalidArgumentError(
                "moulton", f"expected {self.k} coefficients for '{self.name}', got {len(moulton)}"
            )
        if not all(math.isfinite(c) for c in bashforth + moulton):
            raise InvalidArgumentError("coefficients", f"non-finite entry in '{self.name}'")

        divisor = float(self.divisor)
        if divisor == 0.0 or not math.isfinite(divisor):
            raise InvalidArgumentError("divisor", f"must be finite and non-zero, got {divisor!r}")

        object.__setattr__(self, "bashforth", bashforth)
        object.__setattr__(self, "moulton", moulton)
        object.__setattr__(self, "divisor", divisor)
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "bashforth_weights", frozen_copy(bashforth, "bashforth"))
        object.__setattr__(self, "moulton_weights", frozen_copy(moulton, "moulton"))

    @classmethod
    def from_integers(
        cls,
        name: str,
        bashforth: Sequence[int],
        moulton: Sequence[int],
        denominator: int,
        aliases: Sequence[str] = (),
    ) -> "StepOrder":
        """
        Build an order from exact integer numerators over a common denominator.

        Each numerator is rounded once to the nearest double and the divisor is
        ``1.0 / denominator``, so the stored weights match tables written as
        floating-point literals.
        """
        if denominator == 0:
            raise InvalidArgumentError("denominator", f"must be non-zero for '{name}'")
        return cls(
            name=name,
            k=len(bashforth),
            bashforth=tuple(float(c) for c in bashforth),
            moulton=tuple(float(c) for c in moulton),
            divisor=1.0 / denominator,
            aliases=tuple(aliases),
        )

    @property
    def history_length(self) -> int:
        """Number of derivative samples kept between steps (k - 1)."""
        return self.k - 1
