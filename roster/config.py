"""Runtime configuration for the roster shell.

Values are resolved in order: built-in defaults, an optional YAML file
(``--config`` or ``ROSTER_CONFIG``), then ``ROSTER_CAPACITY``. Command-line
options are applied on top by the CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from roster.shell.parsing import InvalidNumberError, parse_int

DEFAULT_CAPACITY = 100

CONFIG_ENV = "ROSTER_CONFIG"
CAPACITY_ENV = "ROSTER_CAPACITY"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Raised when configuration values cannot be used."""


@dataclass(frozen=True)
class RosterConfig:
    capacity: int = DEFAULT_CAPACITY
    pause: bool = True  # wait for Enter after each menu command
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config(path: str | Path | None = None, environ: Optional[dict[str, str]] = None) -> RosterConfig:
    """Resolve a ``RosterConfig`` from a YAML file and the environment."""
    env = os.environ if environ is None else environ
    config = RosterConfig()

    if path is None and env.get(CONFIG_ENV):
        path = env[CONFIG_ENV]
    if path is not None:
        config = replace(config, **_read_config_file(Path(path)))

    raw_capacity = env.get(CAPACITY_ENV)
    if raw_capacity:
        config = replace(config, capacity=_coerce_capacity(raw_capacity, source=CAPACITY_ENV))

    return config


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(RosterConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(map(str, unknown))}")

    values: dict[str, Any] = {}
    if "capacity" in data:
        values["capacity"] = _coerce_capacity(data["capacity"], source=str(path))
    if "pause" in data:
        if not isinstance(data["pause"], bool):
            raise ConfigError(f"'pause' must be true or false in {path}")
        values["pause"] = data["pause"]
    if "log_level" in data:
        values["log_level"] = _coerce_log_level(data["log_level"], source=str(path))
    return values


def _coerce_capacity(value: Any, source: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"capacity from {source} must be an integer, got {value!r}")
    if isinstance(value, int):
        capacity = value
    elif isinstance(value, str):
        try:
            capacity = parse_int(value)
        except InvalidNumberError:
            raise ConfigError(f"capacity from {source} must be an integer, got {value!r}") from None
    else:
        raise ConfigError(f"capacity from {source} must be an integer, got {value!r}")
    if capacity < 0:
        raise ConfigError(f"capacity from {source} must be >= 0, got {capacity}")
    return capacity


def _coerce_log_level(value: Any, source: str) -> str:
    level = str(value).upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigError(
            f"log_level from {source} must be one of {sorted(VALID_LOG_LEVELS)}, got {value!r}"
        )
    return level
