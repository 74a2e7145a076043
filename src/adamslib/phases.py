# src/adamslib/phases.py
from __future__ import annotations
from enum import Enum

__all__ = ["StepPhase"]

class StepPhase(str, Enum):
    """Phases of one predictor-corrector step, in execution order."""
    IDLE = "idle"
    EVALUATING_CURRENT = "evaluating_current"   # f(x_i, y_i)
    PREDICTING = "predicting"
    SHIFTING_HISTORY = "shifting_history"
    CORRECTING = "correcting"                   # f(x_{i+1}, y^(m)) per iteration
    DONE = "done"

    def __str__(self) -> str:
        return self.value
