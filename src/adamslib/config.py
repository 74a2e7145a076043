# src/adamslib/config.py
"""
Runtime configuration for the predictor-corrector stepper.

Configuration lives in an ``[adams]`` TOML table::

    [adams]
    order = "adams16"        # name, alias, or k (e.g. 16)
    epsilon = 1e-12          # corrector tolerance
    max_iterations = 10      # corrector budget per step
    jit = false              # numba kernel for the linear combinations
    warn_unconverged = true  # UnconvergedStepWarning from Trajectory.step

``load_config`` accepts a path or an ``"inline: ..."`` TOML string. A
document without an ``[adams]`` table yields the defaults.
"""
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union
import tomllib

from adamslib.errors import ConfigError

__all__ = ["IntegratorConfig", "default_config", "load_config", "config_from_table"]

TABLE = "adams"


@dataclass(frozen=True)
class IntegratorConfig:
    """Runtime configuration for the Adams predictor-corrector."""
    order: str = "adams12"
    epsilon: float = 1e-12
    max_iterations: int = 10
    jit: bool = False
    warn_unconverged: bool = True


def default_config(**overrides: Any) -> IntegratorConfig:
    """
    Create default config, optionally overriding individual fields.

    Raises:
        ConfigError: on unknown field names or invalid values.
    """
    config = IntegratorConfig()
    if overrides:
        config = config_from_table(overrides, base=config)
    return config


def load_config(source: Union[str, Path]) -> IntegratorConfig:
    """
    Load an IntegratorConfig from a TOML file or an inline TOML string.

    Raises:
        ConfigError: if the file cannot be read, the TOML is malformed, or the
            ``[adams]`` table contains unknown keys or invalid values.
    """
    text = str(source)
    if isinstance(source, str) and text.strip().startswith("inline:"):
        body = text.strip()[len("inline:"):]
        try:
            data = tomllib.loads(body)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse inline config: {e}") from e
    else:
        path = Path(source)
        try:
            with open(path, "rb") as fh:
                data = tomllib.load(fh)
        except OSError as e:
            raise ConfigError(f"Failed to read config from {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config {path}: {e}") from e

    table = data.get(TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{TABLE}] must be a table, got {type(table).__name__}")
    return config_from_table(table)


def config_from_table(table: Dict[str, Any], base: IntegratorConfig | None = None) -> IntegratorConfig:
    """Validate a mapping of config keys and apply it on top of ``base``."""
    base = base if base is not None else IntegratorConfig()
    known = {f.name for f in fields(IntegratorConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in [{TABLE}]: {', '.join(unknown)}\n"
            f"Allowed: {', '.join(sorted(known))}"
        )

    updates: Dict[str, Any] = {}
    for key, value in table.items():
        updates[key] = _coerce(key, value)
    return replace(base, **updates)


def _coerce(key: str, value: Any) -> Any:
    if key == "order":
        from adamslib.orders.registry import get_order
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ConfigError(f"[{TABLE}].order must be a name or an integer, got {value!r}")
        try:
            return get_order(value).name
        except KeyError:
            raise ConfigError(f"[{TABLE}].order: unknown order {value!r}") from None

    if key == "epsilon":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"[{TABLE}].epsilon must be a number, got {value!r}")
        value = float(value)
        if not (value >= 0.0 and value != float("inf")):
            raise ConfigError(f"[{TABLE}].epsilon must be finite and >= 0, got {value!r}")
        return value

    if key == "max_iterations":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"[{TABLE}].max_iterations must be an integer, got {value!r}")
        if value < 1:
            raise ConfigError(f"[{TABLE}].max_iterations must be >= 1, got {value}")
        return value

    # jit, warn_unconverged
    if not isinstance(value, bool):
        raise ConfigError(f"[{TABLE}].{key} must be true or false, got {value!r}")
    return value
