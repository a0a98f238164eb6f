"""Wait for collaborators to become reachable before the first cycle."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dockgraph.config.http_resilience import BackoffPolicy
    from dockgraph.domain.ports.fetching import InventoryProvider
    from dockgraph.domain.ports.persistence import ContainerStore

log = getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class NotReadyError(RuntimeError):
    """Raised by a readiness check that reached its collaborator but found it unusable."""


async def await_ready(
    check: Callable[[], Awaitable[object]],
    policy: BackoffPolicy,
    *,
    name: str,
    sleep: Sleep = asyncio.sleep,
) -> int:
    """Run ``check`` until it stops raising; return the number of attempts used.

    Re-raises the last error once ``policy`` runs out of attempts.
    """

    attempt = 0
    while True:
        attempt += 1
        try:
            await check()
        except Exception as exc:
            if policy.exhausted(attempt):
                log.error("giving up on %s after %s attempts", name, attempt)
                raise
            delay = policy.delay_for(attempt)
            log.warning("failed to connect to %s (%s), retrying in %.1f seconds", name, exc, delay)
            await sleep(delay)
            continue
        log.info("successfully connected to %s", name)
        return attempt


def store_check(store: ContainerStore) -> Callable[[], Awaitable[None]]:
    async def check() -> None:
        if not await store.ping():
            raise NotReadyError("no triples in the database")

    return check


def inventory_check(inventory: InventoryProvider) -> Callable[[], Awaitable[None]]:
    async def check() -> None:
        if not await inventory.ping():
            raise NotReadyError("docker daemon did not answer ping")

    return check


async def await_collaborators(
    *,
    store: ContainerStore,
    inventory: InventoryProvider,
    policy: BackoffPolicy,
    sleep: Sleep = asyncio.sleep,
) -> None:
    await await_ready(store_check(store), policy, name="database", sleep=sleep)
    await await_ready(inventory_check(inventory), policy, name="docker daemon", sleep=sleep)
