"""Docker runtime configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .env import env_bool, optional_env_var
from .http_resilience import ResilienceConfig

DEFAULT_DOCKER_SOCKET: Final[str] = "/var/run/docker.sock"
# The host part is ignored when talking over the unix socket.
DOCKER_BASE_URL: Final[str] = "http://docker"
DOCKER_TIMEOUT_SECONDS: Final[float] = 10.0


def _default_resilience(socket_path: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="docker",
        base_url=DOCKER_BASE_URL,
        timeout_seconds=DOCKER_TIMEOUT_SECONDS,
        uds=socket_path,
    )


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Where and how to list containers."""

    socket_path: str = DEFAULT_DOCKER_SOCKET
    label_filter: str | None = None
    include_stopped: bool = False
    resilience: ResilienceConfig = field(
        default_factory=lambda: _default_resilience(DEFAULT_DOCKER_SOCKET)
    )


def get_runtime_config(*, resilience: ResilienceConfig | None = None) -> RuntimeConfig:
    socket_path = optional_env_var("MONITOR_DOCKER_SOCKET") or DEFAULT_DOCKER_SOCKET
    return RuntimeConfig(
        socket_path=socket_path,
        label_filter=optional_env_var("MONITOR_FILTER_LABEL"),
        include_stopped=env_bool("MONITOR_LIST_ALL"),
        resilience=resilience or _default_resilience(socket_path),
    )
