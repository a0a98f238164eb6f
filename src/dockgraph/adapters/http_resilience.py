from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    TypedDict,
    Unpack,
)

import httpx

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import (
        HeaderTypes,
        QueryParamTypes,
        RequestData,
        TimeoutTypes,
        URLTypes,
    )

    from dockgraph.config.http_resilience import ResilienceConfig


class RequestOptions(TypedDict, total=False):
    params: QueryParamTypes | None
    data: RequestData | None
    headers: HeaderTypes | None


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    transport: httpx.AsyncBaseTransport


class HttpClient:
    """Long-lived async HTTP client built from a :class:`ResilienceConfig`.

    Requests are never retried here: a failed call surfaces to the caller and the
    reconciliation loop decides what happens next.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config

        if transport is None and config.uds is not None:
            transport = httpx.AsyncHTTPTransport(uds=config.uds)

        client_kwargs: AsyncClientOptions = {"timeout": config.timeout_seconds}
        if config.base_url is not None:
            client_kwargs["base_url"] = config.base_url
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self._client.request(method, url, **kwargs)

    async def get(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("POST", url, **kwargs)
