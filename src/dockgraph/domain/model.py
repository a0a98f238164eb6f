"""In-memory representation of stored container records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class ContainerStatus(StrEnum):
    """States reported by the runtime plus the synthetic tombstone."""

    CREATED = "created"
    RESTARTING = "restarting"
    RUNNING = "running"
    REMOVING = "removing"
    PAUSED = "paused"
    EXITED = "exited"
    DEAD = "dead"

    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class LiveContainer:
    """A container as currently observed on the runtime."""

    id: str
    name: str
    status: str
    image: str
    labels: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Label:
    value: str
    identity: str | None = None


@dataclass(eq=False, kw_only=True)
class ContainerRecord:
    """Aggregate root for one stored container.

    ``image`` and ``labels`` are written once when the record is created and never
    revisited; only ``name`` and ``status`` follow the runtime afterwards.
    """

    id: str
    name: str
    status: str
    image: str | None = None
    labels: dict[str, Label] = field(default_factory=dict)
    identity: str | None = None
    _dirty: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_live(cls, live: LiveContainer) -> ContainerRecord:
        return cls(
            id=live.id,
            name=live.name,
            status=live.status,
            image=live.image,
            labels={key: Label(value=value) for key, value in live.labels.items()},
        )

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def is_persisted(self) -> bool:
        return self.identity is not None

    @property
    def is_removed(self) -> bool:
        return self.status == ContainerStatus.REMOVED

    def update(self, live: LiveContainer) -> bool:
        """Take over the mutable fields of ``live``; return whether anything changed."""

        if live.id != self.id:
            raise ValueError(f"Cannot update container {self.id} from {live.id}")
        changed = False
        # name and status are the only properties that change on a running container
        if self.name != live.name:
            self.name = live.name
            changed = True
        if self.status != live.status:
            self.status = live.status
            changed = True
        if changed:
            self._dirty = True
        return changed

    def mark_clean(self) -> None:
        self._dirty = False
