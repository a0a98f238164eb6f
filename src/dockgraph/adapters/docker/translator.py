"""Translate Docker payloads into domain values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dockgraph.domain.model import LiveContainer

if TYPE_CHECKING:
    from .schema import ContainerSummary


def to_live_container(summary: ContainerSummary) -> LiveContainer:
    # Docker reports names with a leading slash ("/web"); they are kept as reported.
    return LiveContainer(
        id=summary.id,
        name=summary.names[0],
        status=summary.state,
        image=summary.image,
        labels=dict(summary.labels),
    )
