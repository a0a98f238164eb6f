"""SPARQL-backed persistence for container records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from dockgraph.domain.errors import StoreUnavailable
from dockgraph.domain.model import ContainerStatus
from dockgraph.domain.ports.persistence import StoredContainer

from .escape import escape_string, escape_uri

if TYPE_CHECKING:
    from dockgraph.domain.model import ContainerRecord

    from .client import SparqlClient

log = getLogger(__name__)

PREFIXES: Final[str] = "PREFIX docker: <https://w3.org/ns/bde/docker#>"


class SparqlContainerStore:
    """Reads and writes container records inside one named graph."""

    def __init__(self, *, client: SparqlClient, graph: str) -> None:
        self._client = client
        self._graph = graph

    async def load_active(self) -> list[StoredContainer]:
        rows = await self._client.select(self.load_active_query())
        containers: list[StoredContainer] = []
        for row in rows:
            try:
                containers.append(
                    StoredContainer(
                        identity=row["uri"],
                        id=row["id"],
                        name=row["name"],
                        status=row["status"],
                    )
                )
            except KeyError as exc:
                raise StoreUnavailable(f"Incomplete container binding, missing {exc}") from exc
        return containers

    async def insert(self, record: ContainerRecord, *, state_identity: str) -> None:
        await self._client.update(self.insert_update(record, state_identity=state_identity))

    async def replace_name_and_status(self, record: ContainerRecord) -> None:
        # The endpoint does not report whether WHERE matched; a record edited or
        # deleted out of band turns this into a silent no-op.
        await self._client.update(self.replace_update(record))
        log.debug("Issued name/status update for %s", record.id)

    async def ping(self) -> bool:
        return await self._client.ask("ASK { ?s ?p ?o }")

    def load_active_query(self) -> str:
        return f"""
{PREFIXES}
SELECT ?uri ?id ?name ?status
FROM {escape_uri(self._graph)}
WHERE {{
  ?uri a docker:Container ;
       docker:id ?id ;
       docker:name ?name ;
       docker:state/docker:status ?status .
  FILTER (?status != {escape_string(ContainerStatus.REMOVED)})
}}
"""

    def insert_update(self, record: ContainerRecord, *, state_identity: str) -> str:
        if record.identity is None:
            raise ValueError(f"Container {record.id} has no identity to insert")
        container = escape_uri(record.identity)
        state = escape_uri(state_identity)
        triples = [
            f"{container} a docker:Container ;\n"
            f"    docker:id {escape_string(record.id)} ;\n"
            f"    docker:name {escape_string(record.name)} ;\n"
            f"    docker:image {escape_string(record.image or '')} ;\n"
            f"    docker:state {state} .",
            f"{state} a docker:State ;\n"
            f"    docker:status {escape_string(record.status)} .",
        ]
        for key, label in record.labels.items():
            if label.identity is None:
                raise ValueError(f"Label {key} of container {record.id} has no identity")
            label_uri = escape_uri(label.identity)
            triples.append(
                f"{container} docker:label {label_uri} .\n"
                f"{label_uri} a docker:ContainerLabel ;\n"
                f"    docker:key {escape_string(key)} ;\n"
                f"    docker:value {escape_string(label.value)} ."
            )
        body = "\n".join(triples)
        return f"""
{PREFIXES}
INSERT DATA {{
  GRAPH {escape_uri(self._graph)} {{
{body}
  }}
}}
"""

    def replace_update(self, record: ContainerRecord) -> str:
        if record.identity is None:
            raise ValueError(f"Container {record.id} has no identity to update")
        container = escape_uri(record.identity)
        return f"""
{PREFIXES}
WITH {escape_uri(self._graph)}
DELETE {{
  {container} docker:name ?name .
  ?state docker:status ?status .
}}
INSERT {{
  {container} docker:name {escape_string(record.name)} .
  ?state docker:status {escape_string(record.status)} .
}}
WHERE {{
  {container} a docker:Container ;
       docker:id {escape_string(record.id)} ;
       docker:name ?name ;
       docker:state ?state .
  ?state docker:status ?status .
}}
"""
