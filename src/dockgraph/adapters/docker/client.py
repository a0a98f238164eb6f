"""Docker Engine API client over the daemon's unix socket."""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from dockgraph.domain.errors import RuntimeUnavailable

from .schema import ContainerList, ContainerSummary
from .translator import to_live_container

if TYPE_CHECKING:
    from dockgraph.adapters.http_resilience import HttpClient
    from dockgraph.config.runtime import RuntimeConfig
    from dockgraph.domain.model import LiveContainer

log = getLogger(__name__)


class DockerAPIError(RuntimeUnavailable):
    """Raised when the Docker daemon cannot be reached or answers unexpectedly."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def label_filters(label_filter: str | None) -> dict[str, list[str]]:
    """Return the ``filters`` mapping for ``/containers/json``."""

    if not label_filter:
        return {}
    return {"label": [label_filter]}


class DockerClient:
    """Low-level client for the few Engine API endpoints the monitor needs."""

    def __init__(self, client: HttpClient) -> None:
        self._client = client

    async def list_containers(
        self,
        *,
        all_: bool = False,
        label_filter: str | None = None,
    ) -> list[ContainerSummary]:
        params: dict[str, str] = {}
        if all_:
            params["all"] = "true"
        filters = label_filters(label_filter)
        if filters:
            params["filters"] = json.dumps(filters)

        response = await self._perform_request("/containers/json", params=params)
        try:
            return ContainerList.model_validate(response.json()).root
        except (ValueError, ValidationError) as exc:
            raise DockerAPIError("Unexpected container list payload") from exc

    async def ping(self) -> bool:
        """Return whether the daemon answers ``GET /_ping`` with ``OK``."""

        response = await self._perform_request("/_ping")
        return response.text.strip() == "OK"

    async def _perform_request(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise DockerAPIError(f"Docker daemon unreachable: {exc}") from exc

        if response.is_error:
            log.error("Docker API error %s on %s: %s", response.status_code, path, response.text)
            raise DockerAPIError(
                f"Docker API returned {response.status_code} for {path}",
                status_code=response.status_code,
            )
        return response


@dataclass(slots=True)
class DockerInventory:
    """Inventory provider listing the containers of one Docker daemon."""

    client: DockerClient
    label_filter: str | None = None
    include_stopped: bool = False

    @classmethod
    def from_config(cls, client: DockerClient, config: RuntimeConfig) -> DockerInventory:
        return cls(
            client=client,
            label_filter=config.label_filter,
            include_stopped=config.include_stopped,
        )

    async def list_current(self) -> list[LiveContainer]:
        summaries = await self.client.list_containers(
            all_=self.include_stopped,
            label_filter=self.label_filter,
        )
        return [to_live_container(summary) for summary in summaries]

    async def ping(self) -> bool:
        return await self.client.ping()
