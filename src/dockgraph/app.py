"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import AsyncExitStack
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from dockgraph.adapters.docker import DockerClient, DockerInventory
from dockgraph.adapters.http_resilience import HttpClient
from dockgraph.adapters.sparql import SparqlClient, SparqlContainerStore, UriIdentityGenerator
from dockgraph.config import get_runtime_config, get_store_config, get_sync_config
from dockgraph.domain.reconciliation import Reconciler
from dockgraph.domain.records import ContainerRecords
from dockgraph.readiness import await_collaborators
from dockgraph.scheduling import CycleScheduler

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from dockgraph.config import RuntimeConfig, StoreConfig, SyncConfig
    from dockgraph.domain.reconciliation import SyncResult

    TransportFactory = Callable[[str], httpx.AsyncBaseTransport | None]

log = getLogger(__name__)


@dataclass(slots=True)
class Monitor:
    """Collaborators built once at startup and held for the process lifetime."""

    store: SparqlContainerStore
    inventory: DockerInventory
    reconciler: Reconciler


def _no_transport(_name: str) -> httpx.AsyncBaseTransport | None:
    return None


class MonitorContext:
    """Async context manager owning the HTTP clients behind a :class:`Monitor`."""

    def __init__(
        self,
        *,
        runtime: RuntimeConfig | None = None,
        store: StoreConfig | None = None,
        transport_factory: TransportFactory = _no_transport,
    ) -> None:
        self._runtime = runtime or get_runtime_config()
        self._store = store or get_store_config()
        self._transport_factory = transport_factory
        self._stack = AsyncExitStack()

    async def __aenter__(self) -> Monitor:
        try:
            return await self._build()
        except BaseException:
            await self._stack.aclose()
            raise

    async def _build(self) -> Monitor:
        docker_http = await self._stack.enter_async_context(
            HttpClient(
                self._runtime.resilience,
                transport=self._transport_factory(self._runtime.resilience.name),
            )
        )
        sparql_http = await self._stack.enter_async_context(
            HttpClient(
                self._store.resilience,
                transport=self._transport_factory(self._store.resilience.name),
            )
        )
        store = SparqlContainerStore(
            client=SparqlClient(endpoint=self._store.endpoint, client=sparql_http),
            graph=self._store.graph,
        )
        inventory = DockerInventory.from_config(DockerClient(docker_http), self._runtime)
        records = ContainerRecords(
            store=store,
            identities=UriIdentityGenerator(base=self._store.resource_base),
        )
        return Monitor(
            store=store,
            inventory=inventory,
            reconciler=Reconciler(inventory=inventory, records=records),
        )

    async def __aexit__(self, *exc_info: object) -> None:
        await self._stack.aclose()


async def _ready(monitor: Monitor, sync: SyncConfig) -> None:
    await await_collaborators(
        store=monitor.store,
        inventory=monitor.inventory,
        policy=sync.readiness,
    )


async def run_monitor(
    *,
    context: MonitorContext | None = None,
    sync: SyncConfig | None = None,
    max_cycles: int | None = None,
) -> int:
    """Wait for Docker and the database, then reconcile on the configured interval."""

    sync_config = sync or get_sync_config()
    async with context or MonitorContext() as monitor:
        await _ready(monitor, sync_config)
        log.info("Starting container sync every %s ms", sync_config.interval_ms)
        scheduler = CycleScheduler(
            monitor.reconciler,
            interval_seconds=sync_config.interval_seconds,
        )
        return await scheduler.run(max_cycles=max_cycles)


async def sync_once(
    *,
    context: MonitorContext | None = None,
    sync: SyncConfig | None = None,
) -> SyncResult:
    """Run a single gated reconciliation cycle; collaborator errors propagate."""

    sync_config = sync or get_sync_config()
    async with context or MonitorContext() as monitor:
        await _ready(monitor, sync_config)
        return await monitor.reconciler.sync()
