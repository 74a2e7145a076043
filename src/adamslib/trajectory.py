# src/adamslib/trajectory.py
from __future__ import annotations
from typing import Optional, Union
import warnings

from adamslib.bootstrap import start as _start
from adamslib.config import IntegratorConfig, default_config
from adamslib.errors import NumericDivergenceError, UnconvergedStepWarning
from adamslib.guards import Derivative, require_step_size
from adamslib.history import HistoryWindow
from adamslib.orders.base import StepOrder
from adamslib.phases import StepPhase
from adamslib.stepper import IntegrationState, Stepper, StepResult

__all__ = ["Trajectory"]


class Trajectory:
    """
    One integration in progress: owns its IntegrationState and HistoryWindow.

    Each ``step()`` advances both by one step of size ``h``. Separate
    Trajectory objects share nothing but the (immutable) order, so they can
    be advanced from different threads.

    ``phase`` reports how the last step ended: IDLE before the first step,
    DONE after a completed one, or the StepPhase in which ``f`` returned a
    non-finite value (EVALUATING_CURRENT or CORRECTING). The intermediate
    phases of a step are not observable here.
    """
    def __init__(
        self,
        order: Union[StepOrder, str, int],
        f: Derivative,
        state: IntegrationState,
        history: HistoryWindow,
        h: float,
        config: Optional[IntegratorConfig] = None,
    ):
        self.stepper = Stepper(order, config)
        self.f = f
        self.h = require_step_size(h)
        history.require_order(self.stepper.order)
        self._state = state
        self._history = history
        self.phase = StepPhase.IDLE
        self.steps_taken = 0
        self.unconverged_steps = 0

    @classmethod
    def start(
        cls,
        order: Union[StepOrder, str, int],
        f: Derivative,
        x0: float,
        y0: float,
        h: float,
        config: Optional[IntegratorConfig] = None,
        method: str = "rk4",
    ) -> "Trajectory":
        """Bootstrap from y(x0) = y0 with a one-step starter (see ``bootstrap.start``)."""
        stepper = Stepper(order, config)
        state, history = _start(stepper.order, f, x0, y0, h, method=method)
        return cls(stepper.order, f, state, history, h, stepper.config)

    @property
    def order(self) -> StepOrder:
        return self.stepper.order

    @property
    def config(self) -> IntegratorConfig:
        return self.stepper.config

    @property
    def state(self) -> IntegrationState:
        return self._state

    @property
    def history(self) -> HistoryWindow:
        return self._history

    @property
    def x(self) -> float:
        return self._state.x

    @property
    def y(self) -> float:
        return self._state.y_curr

    def step(self) -> StepResult:
        """
        Advance by one step and return its StepResult.

        State and window are only replaced when the step completes. A step
        that exhausts the corrector budget is still accepted; it is counted
        in ``unconverged_steps`` and, if enabled, reported with
        ``UnconvergedStepWarning``.
        """
        try:
            result = self.stepper.step(self.f, self._state, self.h, self._history)
        except NumericDivergenceError as exc:
            self.phase = StepPhase(exc.phase)
            raise

        self._state = result.state
        self._history = result.history
        self.steps_taken += 1
        self.phase = StepPhase.DONE

        if not result.converged:
            self.unconverged_steps += 1
            if self.config.warn_unconverged:
                warnings.warn(
                    f"Corrector did not converge at x={result.state.x!r} "
                    f"within {self.config.max_iterations} iterations "
                    f"(epsilon={self.config.epsilon!r}); keeping last iterate.",
                    UnconvergedStepWarning,
                    stacklevel=2,
                )
        return result
