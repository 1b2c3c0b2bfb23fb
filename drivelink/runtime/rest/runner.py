"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import BadServerResponseError, DriveError
from ..messages import HTTPRequest, HTTPResponse, with_retry_after
from ..pagination import PageResult, Paginator
from .transport import RESTTransport

ServerErrorMapper = Callable[[int, bytes, str | None], DriveError]


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "DELETE" ...
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Form-encoded bodies are sent as raw bytes instead of JSON
    build_data: Callable[[dict[str, Any]], bytes] | None = None

    def build_request(self, params: dict[str, Any]) -> HTTPRequest:
        return HTTPRequest(
            method=self.method.upper(),
            url=self.build_path(params),
            params=self.build_query(params) if self.build_query else None,
            headers=self.build_headers(params) if self.build_headers else None,
            json=self.build_body(params) if self.build_body else None,
            body=self.build_data(params) if self.build_data else None,
        )


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class PageAdapter(ResponseAdapter):
    """Adapter for paginated endpoints.

    ``parse_page`` receives the raw response so it can read headers as well
    as the body, and reports the next cursor alongside the records.
    """

    def parse_page(self, response: HTTPResponse, params: dict[str, Any]) -> PageResult[Any]:
        return PageResult(items=self.parse(response.json(), params))


class RestRunner:
    def __init__(
        self,
        transport: RESTTransport,
        *,
        error_mapper: ServerErrorMapper | None = None,
    ) -> None:
        self._t = transport
        self._error_mapper = error_mapper

    def _map_error(self, response: HTTPResponse, params: dict[str, Any]) -> DriveError:
        if self._error_mapper is not None:
            error = self._error_mapper(response.status, response.body, params.get("path"))
            return with_retry_after(error, response)
        return DriveError(f"HTTP {response.status} from {response.url}", path=params.get("path"))

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        """Issue a single request and parse its JSON body.

        Raises:
            DriveError: Mapped server error for statuses >= 400, or
                BadServerResponseError for an unreadable body
        """
        response = await self._t.send(spec.build_request(params))
        if response.is_error:
            raise self._map_error(response, params)
        data = response.json() if response.body else None
        try:
            return adapter.parse(data, params)
        except DriveError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise BadServerResponseError(
                f"unexpected response body: {exc!r}", url=response.url, path=params.get("path")
            ) from exc

    def paginate(
        self, *, spec: RestEndpointSpec, adapter: PageAdapter, params: dict[str, Any]
    ) -> Paginator[Any]:
        """Build a Paginator for a cursor-based endpoint.

        The cursor reaches the spec builders as ``params["cursor"]``.
        """

        def request_builder(token: str | None) -> HTTPRequest | None:
            # Transport torn down mid-listing: stop with what we have
            if self._t.closed:
                return None
            return spec.build_request({**params, "cursor": token})

        def page_parser(response: HTTPResponse) -> PageResult[Any]:
            return adapter.parse_page(response, params)

        return Paginator(
            self._t.send,
            request_builder,
            page_parser,
            error_mapper=lambda response: self._map_error(response, params),
            listing_id=spec.id,
        )
