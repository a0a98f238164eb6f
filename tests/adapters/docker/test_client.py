from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import httpx
import pytest

from dockgraph.adapters.docker import DockerAPIError, DockerClient, DockerInventory, label_filters
from dockgraph.config.http_resilience import ResilienceConfig
from dockgraph.config.runtime import RuntimeConfig
from dockgraph.domain.errors import RuntimeUnavailable

if TYPE_CHECKING:
    from collections.abc import Callable

    from dockgraph.adapters.http_resilience import HttpClient
    from dockgraph.domain.model import LiveContainer

DOCKER = ResilienceConfig(name="docker", base_url="http://docker")


def _list(inventory: DockerInventory) -> list[LiveContainer]:
    async def run() -> list[LiveContainer]:
        try:
            return list(await inventory.list_current())
        finally:
            await inventory.client._client.aclose()  # noqa: SLF001  # type: ignore[reportPrivateUsage]

    return asyncio.run(run())


def test_label_filters() -> None:
    assert label_filters(None) == {}
    assert label_filters("") == {}
    assert label_filters("com.example.monitor=true") == {"label": ["com.example.monitor=true"]}


def test_inventory_lists_running_containers(
    make_client: Callable[..., HttpClient],
    container_payloads: list[dict[str, object]],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=container_payloads)

    inventory = DockerInventory(client=DockerClient(make_client(handler, DOCKER)))

    containers = _list(inventory)

    assert [container.id for container in containers] == ["8dfafdbc3a40", "9cd87474be90"]
    [request] = seen
    assert request.method == "GET"
    assert request.url.path == "/containers/json"
    assert "all" not in request.url.params
    assert "filters" not in request.url.params


def test_inventory_passes_label_filter_and_all_flag(
    make_client: Callable[..., HttpClient],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    config = RuntimeConfig(label_filter="monitor=true", include_stopped=True)
    inventory = DockerInventory.from_config(DockerClient(make_client(handler, DOCKER)), config)

    assert _list(inventory) == []
    params = seen[0].url.params
    assert params["all"] == "true"
    assert json.loads(params["filters"]) == {"label": ["monitor=true"]}


def test_daemon_error_maps_to_runtime_unavailable(
    make_client: Callable[..., HttpClient],
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "boom"})

    inventory = DockerInventory(client=DockerClient(make_client(handler, DOCKER)))

    with pytest.raises(DockerAPIError) as excinfo:
        _list(inventory)

    assert excinfo.value.status_code == 500
    assert isinstance(excinfo.value, RuntimeUnavailable)


def test_connection_failure_maps_to_runtime_unavailable(
    make_client: Callable[..., HttpClient],
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("socket missing", request=request)

    inventory = DockerInventory(client=DockerClient(make_client(handler, DOCKER)))

    with pytest.raises(RuntimeUnavailable):
        _list(inventory)


def test_invalid_payload_maps_to_runtime_unavailable(
    make_client: Callable[..., HttpClient],
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"not": "a list"})

    inventory = DockerInventory(client=DockerClient(make_client(handler, DOCKER)))

    with pytest.raises(DockerAPIError):
        _list(inventory)


def test_ping_hits_ping_endpoint(make_client: Callable[..., HttpClient]) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="OK")

    inventory = DockerInventory(client=DockerClient(make_client(handler, DOCKER)))

    async def run() -> bool:
        try:
            return await inventory.ping()
        finally:
            await inventory.client._client.aclose()  # noqa: SLF001  # type: ignore[reportPrivateUsage]

    assert asyncio.run(run()) is True
    [request] = seen
    assert request.method == "GET"
    assert request.url.path == "/_ping"


def test_ping_error_maps_to_runtime_unavailable(
    make_client: Callable[..., HttpClient],
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="starting")

    client = DockerClient(make_client(handler, DOCKER))

    async def run() -> bool:
        try:
            return await client.ping()
        finally:
            await client._client.aclose()  # noqa: SLF001  # type: ignore[reportPrivateUsage]

    with pytest.raises(DockerAPIError) as excinfo:
        asyncio.run(run())

    assert excinfo.value.status_code == 503
