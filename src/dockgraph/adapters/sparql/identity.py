"""Mint URIs for newly stored resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final
from uuid import uuid4

from dockgraph.domain.ports.identity import IdentityKind

if TYPE_CHECKING:
    from collections.abc import Callable

PATH_SEGMENTS: Final[dict[IdentityKind, str]] = {
    IdentityKind.CONTAINER: "docker-container",
    IdentityKind.STATE: "docker-state",
    IdentityKind.LABEL: "container-label",
}


def _uuid() -> str:
    return str(uuid4())


@dataclass(frozen=True, slots=True)
class UriIdentityGenerator:
    base: str
    uuid_factory: Callable[[], str] = _uuid

    def new_identity(self, kind: IdentityKind) -> str:
        base = self.base if self.base.endswith("/") else self.base + "/"
        return f"{base}{PATH_SEGMENTS[kind]}/{self.uuid_factory()}"
