"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import InventoryProvider
from .identity import IdentityGenerator, IdentityKind
from .persistence import ContainerStore, StoredContainer

__all__ = [
    "ContainerStore",
    "IdentityGenerator",
    "IdentityKind",
    "InventoryProvider",
    "StoredContainer",
]
