"""Cursor-driven listing engine.

The Paginator walks a server-paginated result set one request at a time.
Every page is requested with the token handed back by the previous
response, so pages are strictly sequential; the engine never invents a
cursor of its own and never retries a failed page.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Generic, TypeVar

from ...core.exceptions import BadServerResponseError, DriveError, PaginationProtocolError
from ..messages import HTTPRequest, HTTPResponse
from .definitions import PageResult
from .telemetry import log_listing_complete, log_listing_error, log_page_fetched

T = TypeVar("T")

SendFunc = Callable[[HTTPRequest], Awaitable[HTTPResponse]]
RequestBuilder = Callable[[str | None], HTTPRequest | None]
PageParser = Callable[[HTTPResponse], PageResult[T]]
ErrorMapper = Callable[[HTTPResponse], DriveError]


class Paginator(Generic[T]):
    """Runs request -> parse -> continue cycles until the listing ends.

    A listing ends when the request builder declines to build a request,
    when a page comes back without a next token, or on the first error.
    A token that was already requested during this listing is treated as
    a protocol error, since following it would loop forever.
    """

    def __init__(
        self,
        send: SendFunc,
        request_builder: RequestBuilder,
        page_parser: PageParser[T],
        *,
        error_mapper: ErrorMapper | None = None,
        listing_id: str = "listing",
    ) -> None:
        """Initialize paginator.

        Args:
            send: Async callable that issues a request and returns the raw response
            request_builder: Builds the request for a token (None = first page);
                returning None stops the listing
            page_parser: Turns a raw response into a PageResult
            error_mapper: Maps responses with status >= 400 to an error; when
                absent such responses go to the parser unchanged
            listing_id: Identifier used in log records
        """
        self._send = send
        self._build = request_builder
        self._parse = page_parser
        self._error_mapper = error_mapper
        self._listing_id = listing_id

    async def run_to_completion(self) -> PageResult[T]:
        """Fetch every page and return the concatenated items.

        The returned result never carries a next token. On failure ``error``
        holds the first error and ``items`` whatever was collected before it.
        """
        items: list[T] = []
        requested: set[str] = set()
        token: str | None = None
        page_index = 0
        pages = 0

        while True:
            request = self._build(token)
            if request is None:
                break

            started = perf_counter()
            try:
                response = await self._send(request)
            except DriveError as exc:
                return self._fail(exc, items, page_index)

            if response.is_error and self._error_mapper is not None:
                return self._fail(self._error_mapper(response), items, page_index)

            try:
                page = self._parse(response)
            except BadServerResponseError as exc:
                exc.url = exc.url or response.url
                return self._fail(exc, items, page_index)
            except DriveError as exc:
                return self._fail(exc, items, page_index)
            except (KeyError, TypeError, ValueError) as exc:
                bad = BadServerResponseError(f"unexpected page body: {exc!r}", url=response.url)
                bad.__cause__ = exc
                return self._fail(bad, items, page_index)
            pages += 1
            items.extend(page.items)
            log_page_fetched(
                listing_id=self._listing_id,
                page_index=page_index,
                items=len(page.items),
                has_next=page.next_token is not None,
                latency_ms=(perf_counter() - started) * 1000.0,
            )
            if page.error is not None:
                return self._fail(page.error, items, page_index)

            if page.next_token is None:
                break
            if page.next_token in requested or page.next_token == token:
                error = PaginationProtocolError(
                    f"server repeated page token {page.next_token!r}",
                    token=page.next_token,
                )
                return self._fail(error, items, page_index)

            if token is not None:
                requested.add(token)
            token = page.next_token
            page_index += 1

        log_listing_complete(listing_id=self._listing_id, pages=pages, total_items=len(items))
        return PageResult(items=items)

    def _fail(self, error: DriveError, items: list[T], page_index: int) -> PageResult[T]:
        log_listing_error(
            listing_id=self._listing_id,
            page_index=page_index,
            error_type=type(error).__name__,
            error_message=str(error),
            partial_items=len(items),
        )
        return PageResult(items=items, error=error)
