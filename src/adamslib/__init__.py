# src/adamslib/__init__.py
from __future__ import annotations

from .errors import (
    AdamsError, InvalidArgumentError, NumericDivergenceError, ConfigError,
    UnconvergedStepWarning,
)
from .phases import StepPhase

from .orders import (
    StepOrder, register, get_order, registry, list_orders,
    ADAMS2, ADAMS3, ADAMS4, ADAMS12, ADAMS16, ADAMS20,
)
from .history import HistoryWindow
from .convergence import has_converged
from .predictor import predict
from .corrector import ConvergenceOutcome, correct
from .config import IntegratorConfig, default_config, load_config
from .stepper import IntegrationState, StepResult, step, step_state, Stepper
from .bootstrap import bootstrap_history, starter_samples, start
from .trajectory import Trajectory


__all__ = [
    # Core entry points
    "bootstrap_history", "step", "step_state", "Stepper", "Trajectory", "start",
    # Orders
    "StepOrder", "register", "get_order", "registry", "list_orders",
    "ADAMS2", "ADAMS3", "ADAMS4", "ADAMS12", "ADAMS16", "ADAMS20",
    # Building blocks
    "HistoryWindow", "IntegrationState", "StepResult", "ConvergenceOutcome",
    "StepPhase", "has_converged", "predict", "correct", "starter_samples",
    # Configuration
    "IntegratorConfig", "default_config", "load_config",
    # Errors
    "AdamsError", "InvalidArgumentError", "NumericDivergenceError", "ConfigError",
    "UnconvergedStepWarning",
]
