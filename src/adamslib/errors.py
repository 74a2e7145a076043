# src/adamslib/errors.py
from __future__ import annotations

__all__ = [
    "AdamsError",
    "InvalidArgumentError",
    "NumericDivergenceError",
    "ConfigError",
    "UnconvergedStepWarning",
]

class AdamsError(Exception):
    """Base error for the adamslib package."""


class InvalidArgumentError(AdamsError, ValueError):
    """Raised when an argument violates a precondition of the integrator."""
    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"Invalid argument '{name}': {message}")


class NumericDivergenceError(AdamsError, ArithmeticError):
    """Raised when the derivative callable returns NaN or +/-inf."""
    def __init__(self, x: float, y: float, value: float, phase: str):
        self.x = x
        self.y = y
        self.value = value
        self.phase = phase
        msg = f"Non-finite derivative: f({x!r}, {y!r}) = {value!r}\n"
        msg += f"Phase: {phase}"
        super().__init__(msg)


class ConfigError(AdamsError):
    """Raised when configuration file is malformed or invalid."""
    def __init__(self, message: str):
        super().__init__(message)


class UnconvergedStepWarning(RuntimeWarning):
    """Emitted when the corrector exhausts its iteration budget."""
