"""Reusable fakes and helpers for reconciliation tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dockgraph.domain.errors import RuntimeUnavailable, StoreUnavailable
from dockgraph.domain.model import ContainerStatus, LiveContainer
from dockgraph.domain.ports.persistence import StoredContainer

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from dockgraph.domain.model import ContainerRecord
    from dockgraph.domain.ports.identity import IdentityKind


def make_live(
    container_id: str = "c1",
    *,
    name: str = "web",
    status: str = ContainerStatus.RUNNING,
    image: str = "nginx",
    labels: Mapping[str, str] | None = None,
) -> LiveContainer:
    return LiveContainer(
        id=container_id,
        name=name,
        status=status,
        image=image,
        labels=dict(labels or {}),
    )


@dataclass(slots=True)
class FakeInventory:
    """Inventory returning a mutable list of live containers."""

    containers: list[LiveContainer] = field(default_factory=list)
    fail: bool = False
    calls: int = 0
    pings: int = 0

    async def list_current(self) -> list[LiveContainer]:
        self.calls += 1
        if self.fail:
            raise RuntimeUnavailable("docker daemon unreachable")
        return list(self.containers)

    async def ping(self) -> bool:
        self.pings += 1
        if self.fail:
            raise RuntimeUnavailable("docker daemon unreachable")
        return True


@dataclass(slots=True)
class StoredGraph:
    """One stored container as the fake store keeps it."""

    identity: str
    id: str
    name: str
    image: str | None
    state_identity: str
    status: str
    labels: dict[str, tuple[str, str]] = field(default_factory=dict)


@dataclass(slots=True)
class Write:
    kind: str
    container_id: str
    name: str
    status: str


@dataclass(slots=True)
class FakeStore:
    """In-memory container store recording every write it receives."""

    containers: dict[str, StoredGraph] = field(default_factory=dict)
    writes: list[Write] = field(default_factory=list)
    fail_loads: bool = False
    fail_writes_after: int | None = None
    has_data: bool = True
    filter_removed: bool = True

    def seed(
        self,
        container_id: str,
        *,
        name: str = "web",
        status: str = ContainerStatus.RUNNING,
        identity: str | None = None,
    ) -> StoredGraph:
        uri = identity or f"urn:container:{container_id}"
        graph = StoredGraph(
            identity=uri,
            id=container_id,
            name=name,
            image="nginx",
            state_identity=f"urn:state:{container_id}",
            status=status,
        )
        self.containers[uri] = graph
        return graph

    def by_id(self, container_id: str) -> list[StoredGraph]:
        return [graph for graph in self.containers.values() if graph.id == container_id]

    async def load_active(self) -> Sequence[StoredContainer]:
        if self.fail_loads:
            raise StoreUnavailable("store offline")
        return [
            StoredContainer(
                identity=graph.identity, id=graph.id, name=graph.name, status=graph.status
            )
            for graph in self.containers.values()
            if not (self.filter_removed and graph.status == ContainerStatus.REMOVED)
        ]

    async def insert(self, record: ContainerRecord, *, state_identity: str) -> None:
        self._check_write()
        assert record.identity is not None
        self.containers[record.identity] = StoredGraph(
            identity=record.identity,
            id=record.id,
            name=record.name,
            image=record.image,
            state_identity=state_identity,
            status=record.status,
            labels={
                key: (label.identity or "", label.value) for key, label in record.labels.items()
            },
        )
        self.writes.append(Write("create", record.id, record.name, record.status))

    async def replace_name_and_status(self, record: ContainerRecord) -> None:
        self._check_write()
        assert record.identity is not None
        self.writes.append(Write("update", record.id, record.name, record.status))
        graph = self.containers.get(record.identity)
        if graph is None or graph.id != record.id:
            return
        graph.name = record.name
        graph.status = record.status

    async def ping(self) -> bool:
        return self.has_data

    def _check_write(self) -> None:
        if self.fail_writes_after is not None and len(self.writes) >= self.fail_writes_after:
            raise StoreUnavailable("write rejected")


@dataclass(slots=True)
class SequentialIdentities:
    """Deterministic identity generator: ``urn:<kind>:<n>``."""

    issued: list[str] = field(default_factory=list)

    def new_identity(self, kind: IdentityKind) -> str:
        identity = f"urn:{kind}:{len(self.issued) + 1}"
        self.issued.append(identity)
        return identity
