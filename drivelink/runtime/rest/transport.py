"""REST transport shared by the engines and one-shot endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from .http_client import HTTPClient, ResponseHook
from ..messages import HTTPRequest, HTTPResponse


class RESTTransport:
    """Thin wrapper over ``HTTPClient`` that stamps default headers.

    Connectors put the bearer credential here so request builders never
    have to know about it. The transport is shared read-only by every
    listing and upload running against the same provider.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._headers = dict(headers or {})

    @property
    def closed(self) -> bool:
        return self._http.closed

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        if self._headers:
            request = request.with_headers(self._headers)
        return await self._http.request(request)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
