"""Errors raised while reading the monitor's environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a ``MONITOR_*`` or ``MU_*`` value cannot be parsed or is out of range."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a required variable such as ``MU_APPLICATION_GRAPH`` is unset or blank."""
