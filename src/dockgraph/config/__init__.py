"""Application configuration helpers."""

from __future__ import annotations

from .env import env_bool, env_int, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import BackoffPolicy, ResilienceConfig
from .logging import configure_logging, get_log_level, parse_log_level
from .runtime import RuntimeConfig, get_runtime_config
from .store import StoreConfig, get_store_config
from .sync import SyncConfig, get_sync_config

__all__ = [
    "BackoffPolicy",
    "ConfigurationError",
    "MissingConfigurationError",
    "ResilienceConfig",
    "RuntimeConfig",
    "StoreConfig",
    "SyncConfig",
    "configure_logging",
    "env_bool",
    "env_int",
    "get_log_level",
    "get_runtime_config",
    "get_store_config",
    "get_sync_config",
    "optional_env_var",
    "parse_log_level",
    "require_env_var",
    "require_env_vars",
]
