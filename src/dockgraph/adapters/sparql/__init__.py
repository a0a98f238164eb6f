"""Public interface for the SPARQL store adapter."""

from __future__ import annotations

from .client import SparqlClient, SparqlEndpointError
from .escape import escape_string, escape_uri
from .identity import UriIdentityGenerator
from .store import PREFIXES, SparqlContainerStore

__all__ = [
    "PREFIXES",
    "SparqlClient",
    "SparqlContainerStore",
    "SparqlEndpointError",
    "UriIdentityGenerator",
    "escape_string",
    "escape_uri",
]
