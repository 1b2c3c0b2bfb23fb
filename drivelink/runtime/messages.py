"""Transport-neutral request and response records.

The engines only ever see these two types: a request is built by a
provider callback, handed to the transport, and the raw status, headers
and body come back untouched.
"""

from __future__ import annotations

import json as _json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..core.exceptions import BadServerResponseError, DriveError, RateLimitError


@dataclass(frozen=True)
class HTTPRequest:
    method: str
    url: str
    params: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    body: bytes | None = None
    json: Any = None
    allow_redirects: bool = True

    def with_headers(self, headers: Mapping[str, str]) -> HTTPRequest:
        """Return a copy with ``headers`` added underneath the request's own."""
        merged = {**headers, **(self.headers or {})}
        return HTTPRequest(
            method=self.method,
            url=self.url,
            params=self.params,
            headers=merged,
            body=self.body,
            json=self.json,
            allow_redirects=self.allow_redirects,
        )


@dataclass(frozen=True)
class HTTPResponse:
    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def is_error(self) -> bool:
        return self.status >= 400

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default

    @property
    def retry_after(self) -> float | None:
        """Seconds from a numeric Retry-After header, or None."""
        value = self.header("Retry-After")
        if value is None:
            return None
        try:
            return float(value)
        except ValueError:
            return None

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            BadServerResponseError: If the body is empty or not valid JSON
        """
        if not self.body:
            raise BadServerResponseError("empty response body", url=self.url)
        try:
            return _json.loads(self.body)
        except ValueError as exc:
            raise BadServerResponseError(f"invalid JSON body: {exc}", url=self.url) from exc


def with_retry_after(error: DriveError, response: HTTPResponse) -> DriveError:
    """Copy the response's Retry-After onto a mapped RateLimitError."""
    if isinstance(error, RateLimitError) and error.retry_after is None:
        error.retry_after = response.retry_after
    return error
