from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dockgraph.adapters.sparql import SparqlClient, SparqlContainerStore
from tests.support.sparql import ENDPOINT, GRAPH, SPARQL, RecordingEndpoint

if TYPE_CHECKING:
    from collections.abc import Callable

    from dockgraph.adapters.http_resilience import HttpClient


@pytest.fixture
def endpoint() -> RecordingEndpoint:
    return RecordingEndpoint()


@pytest.fixture
def sparql_store(
    endpoint: RecordingEndpoint,
    make_client: Callable[..., HttpClient],
) -> SparqlContainerStore:
    client = SparqlClient(endpoint=ENDPOINT, client=make_client(endpoint, SPARQL))
    return SparqlContainerStore(client=client, graph=GRAPH)
