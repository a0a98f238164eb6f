"""Run reconciliation cycles on a fixed interval."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from dockgraph.domain.errors import DockGraphError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from dockgraph.domain.reconciliation import Reconciler, SyncResult

log = getLogger(__name__)


class CycleScheduler:
    """Invoke :meth:`Reconciler.sync` repeatedly, never overlapping cycles.

    The interval is measured from the end of one cycle to the start of the next.
    Collaborator outages only cost the current cycle; the following cycle starts
    from the store's state again.
    """

    def __init__(
        self,
        reconciler: Reconciler,
        *,
        interval_seconds: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if interval_seconds < 0:
            raise ValueError("interval_seconds must be non-negative")
        self._reconciler = reconciler
        self._interval = interval_seconds
        self._sleep = sleep
        self.failures = 0

    async def run_cycle(self) -> SyncResult | None:
        try:
            return await self._reconciler.sync()
        except DockGraphError:
            self.failures += 1
            log.exception("Reconciliation cycle failed")
            return None

    async def run(self, *, max_cycles: int | None = None) -> int:
        """Run cycles until ``max_cycles`` (forever when ``None``); return cycles run."""

        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            await self.run_cycle()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            await self._sleep(self._interval)
        return cycles
