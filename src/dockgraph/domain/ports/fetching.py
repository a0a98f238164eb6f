"""Ports for observing the container runtime."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dockgraph.domain.model import LiveContainer


@runtime_checkable
class InventoryProvider(Protocol):
    """Returns the containers currently known to the runtime.

    Implementations raise ``RuntimeUnavailable`` when the runtime cannot be reached.
    """

    async def list_current(self) -> Sequence[LiveContainer]: ...

    async def ping(self) -> bool: ...


__all__ = ["InventoryProvider"]
