"""Diff the live runtime snapshot against stored records and apply the result."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from dockgraph.domain.model import ContainerRecord

if TYPE_CHECKING:
    from dockgraph.domain.model import LiveContainer
    from dockgraph.domain.ports.fetching import InventoryProvider
    from dockgraph.domain.records import ContainerRecords, WriteKind

log = getLogger(__name__)


@dataclass(slots=True)
class SyncResult:
    """Outcome of one reconciliation cycle."""

    fetched: int = 0
    loaded: int = 0
    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    tombstoned: list[str] = field(default_factory=list)

    @property
    def writes(self) -> int:
        return len(self.created) + len(self.updated) + len(self.tombstoned)

    def __str__(self) -> str:
        return (
            f"SyncResult(fetched={self.fetched}, loaded={self.loaded}, "
            f"created={len(self.created)}, updated={len(self.updated)}, "
            f"unchanged={len(self.unchanged)}, tombstoned={len(self.tombstoned)})"
        )


def _pop_match(live: list[LiveContainer], container_id: str) -> LiveContainer | None:
    """Remove and return the first live container with ``container_id``."""

    for index, candidate in enumerate(live):
        if candidate.id == container_id:
            return live.pop(index)
    return None


class Reconciler:
    """Runs reconciliation cycles between an inventory provider and stored records.

    Any collaborator failure aborts the rest of the cycle; writes issued before the
    failure stay committed and the next cycle picks up from the store's state.
    """

    def __init__(self, *, inventory: InventoryProvider, records: ContainerRecords) -> None:
        self._inventory = inventory
        self._records = records

    async def sync(self) -> SyncResult:
        live = list(await self._inventory.list_current())
        persisted = await self._records.load_all()
        result = SyncResult(fetched=len(live), loaded=len(persisted))

        for record in persisted:
            current = _pop_match(live, record.id)
            if current is not None:
                record.update(current)
                written = await self._records.save(record)
                _track_update(result, record.id, written)
            elif not record.is_removed:
                log.info("removing container %s because it is no longer running", record.name)
                await self._records.remove(record)
                result.tombstoned.append(record.id)

        for current in live:
            record = ContainerRecord.from_live(current)
            log.info("storing new container %s (%s)", record.name, record.id)
            await self._records.save(record, force=True)
            result.created.append(record.id)

        log.info("Finished sync: %s", result)
        return result


def _track_update(result: SyncResult, container_id: str, written: WriteKind | None) -> None:
    if written is None:
        result.unchanged.append(container_id)
    else:
        result.updated.append(container_id)
