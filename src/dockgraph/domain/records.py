"""Load and persist container records with an idempotent write discipline.

A reconciliation cycle calls :meth:`ContainerRecords.save` for every known
container on every poll, so saving a clean record must not touch the store.
Records without an identity have never been stored and take the create path;
all others take the update path, which only ever rewrites ``name`` and the
status of the linked state.
"""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from dockgraph.domain.model import ContainerRecord, ContainerStatus
from dockgraph.domain.ports.identity import IdentityKind

if TYPE_CHECKING:
    from dockgraph.domain.ports.identity import IdentityGenerator
    from dockgraph.domain.ports.persistence import ContainerStore

log = getLogger(__name__)


class WriteKind(StrEnum):
    CREATE = "create"
    UPDATE = "update"


class ContainerRecords:
    """Entity-model service over a :class:`ContainerStore`."""

    def __init__(self, *, store: ContainerStore, identities: IdentityGenerator) -> None:
        self._store = store
        self._identities = identities

    async def load_all(self) -> list[ContainerRecord]:
        """Return every non-tombstoned record. Labels are not loaded."""

        rows = await self._store.load_active()
        records = [
            ContainerRecord(id=row.id, name=row.name, status=row.status, identity=row.identity)
            for row in rows
        ]
        return [record for record in records if not record.is_removed]

    async def save(self, record: ContainerRecord, *, force: bool = False) -> WriteKind | None:
        """Persist ``record`` if it changed (or ``force``), issuing exactly one write."""

        if not record.dirty and not force:
            log.debug("Not dirty, skipping save for %s", record.id)
            return None

        if record.is_persisted:
            await self._store.replace_name_and_status(record)
            kind = WriteKind.UPDATE
        else:
            await self._create(record)
            kind = WriteKind.CREATE

        record.mark_clean()
        return kind

    async def set_status(self, record: ContainerRecord, status: str) -> WriteKind | None:
        if record.status == status:
            return None
        record.status = status
        return await self.save(record, force=True)

    async def remove(self, record: ContainerRecord) -> WriteKind | None:
        """Tombstone ``record``; it is never loaded again afterwards."""

        return await self.set_status(record, ContainerStatus.REMOVED)

    async def _create(self, record: ContainerRecord) -> None:
        identity = self._identities.new_identity(IdentityKind.CONTAINER)
        state_identity = self._identities.new_identity(IdentityKind.STATE)
        for label in record.labels.values():
            if label.identity is None:
                label.identity = self._identities.new_identity(IdentityKind.LABEL)

        record.identity = identity
        try:
            await self._store.insert(record, state_identity=state_identity)
        except BaseException:
            # not stored, so the next attempt must take the create path again
            record.identity = None
            raise
