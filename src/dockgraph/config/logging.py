"""Shared logging helpers for dockgraph."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import ConfigurationError


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for container logs. Pass ``force=True``
    to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def parse_log_level(value: str) -> int:
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value!r}")
    return level


def get_log_level(default: int = logging.INFO) -> int:
    value = optional_env_var("MONITOR_LOG_LEVEL")
    if value is None:
        return default
    return parse_log_level(value)
