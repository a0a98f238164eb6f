"""HTTP client for a SPARQL 1.1 query/update endpoint."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from dockgraph.domain.errors import StoreUnavailable

from .schema import AskResponse, SelectResponse

if TYPE_CHECKING:
    from dockgraph.adapters.http_resilience import HttpClient

log = getLogger(__name__)


class SparqlEndpointError(StoreUnavailable):
    """Raised when the SPARQL endpoint fails or returns an unusable payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SparqlClient:
    """Sends queries and updates as form-encoded POSTs to one endpoint."""

    def __init__(self, *, endpoint: str, client: HttpClient) -> None:
        self._endpoint = endpoint
        self._client = client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def select(self, query: str) -> list[dict[str, str]]:
        """Run a SELECT query and return its bindings as plain strings."""

        payload = await self._post({"query": query})
        try:
            return SelectResponse.model_validate(payload).rows()
        except ValidationError as exc:
            raise SparqlEndpointError("Unexpected SELECT result payload") from exc

    async def ask(self, query: str) -> bool:
        payload = await self._post({"query": query})
        try:
            return AskResponse.model_validate(payload).boolean
        except ValidationError as exc:
            raise SparqlEndpointError("Unexpected ASK result payload") from exc

    async def update(self, update: str) -> None:
        await self._post({"update": update}, expect_json=False)

    async def _post(self, form: dict[str, str], *, expect_json: bool = True) -> object:
        try:
            response = await self._client.post(self._endpoint, data=form)
        except httpx.HTTPError as exc:
            raise SparqlEndpointError(f"SPARQL endpoint unreachable: {exc}") from exc

        if response.is_error:
            log.error(
                "SPARQL endpoint error %s: %s", response.status_code, response.text
            )
            raise SparqlEndpointError(
                f"SPARQL endpoint returned {response.status_code}",
                status_code=response.status_code,
            )

        if not expect_json:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise SparqlEndpointError("SPARQL endpoint returned invalid JSON") from exc
