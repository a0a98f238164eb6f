from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from dockgraph.adapters.http_resilience import HttpClient
from dockgraph.domain.reconciliation import Reconciler
from dockgraph.domain.records import ContainerRecords
from tests.support.containers import FakeInventory, FakeStore, SequentialIdentities

if TYPE_CHECKING:
    from collections.abc import Callable

    from dockgraph.config.http_resilience import ResilienceConfig

    from typing import TypeAlias

    Handler: TypeAlias = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def identities() -> SequentialIdentities:
    return SequentialIdentities()


@pytest.fixture
def inventory() -> FakeInventory:
    return FakeInventory()


@pytest.fixture
def records(store: FakeStore, identities: SequentialIdentities) -> ContainerRecords:
    return ContainerRecords(store=store, identities=identities)


@pytest.fixture
def reconciler(inventory: FakeInventory, records: ContainerRecords) -> Reconciler:
    return Reconciler(inventory=inventory, records=records)


@pytest.fixture
def make_client() -> Callable[[Handler, ResilienceConfig], HttpClient]:
    def factory(handler: Handler, config: ResilienceConfig) -> HttpClient:
        async def async_handler(request: httpx.Request) -> httpx.Response:
            return handler(request)

        return HttpClient(config, transport=httpx.MockTransport(async_handler))

    return factory
