"""Scheduling defaults for the reconciliation loop."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_int
from .errors import ConfigurationError
from .http_resilience import BackoffPolicy

DEFAULT_SYNC_INTERVAL_MS = 1000


@dataclass(frozen=True, slots=True)
class SyncConfig:
    interval_ms: int = DEFAULT_SYNC_INTERVAL_MS
    readiness: BackoffPolicy = field(default_factory=BackoffPolicy)

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000


def get_sync_config() -> SyncConfig:
    interval_ms = env_int("MONITOR_SYNC_INTERVAL", DEFAULT_SYNC_INTERVAL_MS)
    if interval_ms < 0:
        raise ConfigurationError("MONITOR_SYNC_INTERVAL must be non-negative")
    return SyncConfig(interval_ms=interval_ms)
