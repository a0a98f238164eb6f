"""Ports for persisting container records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dockgraph.domain.model import ContainerRecord


@dataclass(frozen=True, slots=True)
class StoredContainer:
    """Row shape returned when loading records; labels and image are not loaded."""

    identity: str
    id: str
    name: str
    status: str


@runtime_checkable
class ContainerStore(Protocol):
    """Persistence contract for the record store.

    Every method raises ``StoreUnavailable`` on transport or query failure.
    """

    async def load_active(self) -> Sequence[StoredContainer]:
        """Return every record whose status is not ``removed``."""
        ...

    async def insert(self, record: ContainerRecord, *, state_identity: str) -> None:
        """Unconditionally insert the record, its state and all of its labels.

        ``record.identity`` and every label identity are already assigned.
        """
        ...

    async def replace_name_and_status(self, record: ContainerRecord) -> None:
        """Swap the stored name and linked state status for the record's current values.

        Scoped by a pattern match on the stored record; when the pattern no longer
        matches the write silently does nothing.
        """
        ...

    async def ping(self) -> bool:
        """Return whether the store holds any data at all."""
        ...


__all__ = ["ContainerStore", "StoredContainer"]
