"""Port for minting identities of newly stored entities."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable


class IdentityKind(StrEnum):
    CONTAINER = "container"
    STATE = "state"
    LABEL = "label"


@runtime_checkable
class IdentityGenerator(Protocol):
    def new_identity(self, kind: IdentityKind) -> str: ...


__all__ = ["IdentityGenerator", "IdentityKind"]
