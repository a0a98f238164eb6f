"""Configuration types for HTTP clients and readiness backoff."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    uds: str | None = None
    default_headers: Mapping[str, str] | None = None


@dataclass(slots=True, frozen=True)
class BackoffPolicy:
    """Exponential backoff used while waiting for collaborators at startup.

    ``max_attempts=None`` keeps retrying forever, which is what the service does
    when a dependency is slow to come up.
    """

    initial_delay: float = 1.0
    factor: float = 2.0
    max_delay: float | None = None
    max_attempts: int | None = None

    def delay_for(self, attempt: int) -> float:
        """Return the wait after the ``attempt``-th failure (1-based)."""

        if attempt < 1:
            raise ValueError("attempt must be >= 1")
        delay = self.initial_delay * (self.factor ** (attempt - 1))
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def exhausted(self, attempt: int) -> bool:
        return self.max_attempts is not None and attempt >= self.max_attempts
