"""Public interface for the Docker adapter."""

from __future__ import annotations

from .client import DockerAPIError, DockerClient, DockerInventory, label_filters
from .schema import ContainerList, ContainerSummary
from .translator import to_live_container

__all__ = [
    "ContainerList",
    "ContainerSummary",
    "DockerAPIError",
    "DockerClient",
    "DockerInventory",
    "label_filters",
    "to_live_container",
]
