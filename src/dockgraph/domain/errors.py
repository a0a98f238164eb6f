"""Failures that abort a reconciliation cycle."""

from __future__ import annotations


class DockGraphError(RuntimeError):
    """Base class for collaborator failures surfaced by the core."""


class RuntimeUnavailable(DockGraphError):
    """The container runtime could not be listed."""


class StoreUnavailable(DockGraphError):
    """A read or write against the record store failed."""
