"""HTTP client helper."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from ...core.exceptions import TransportError
from ..messages import HTTPRequest, HTTPResponse

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], float | None | Awaitable[float | None]]

# Statuses that carry a Retry-After and are retried transparently
RATE_LIMIT_STATUSES = frozenset({429})
DEFAULT_RETRY_AFTER = 1.0


class HTTPClient:
    """Async HTTP client wrapper.

    Response hooks see every response before its body is read; a hook may
    return a delay in seconds (directly or from a coroutine), which opens a
    throttle window that the next request waits out. Rate-limited responses
    are retried after their Retry-After delay up to ``max_rate_limit_retries``
    times; the last one is returned to the caller as is.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        *,
        max_rate_limit_retries: int = 3,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_rate_limit_retries = max_rate_limit_retries
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    @property
    def closed(self) -> bool:
        return self._session is not None and self._session.closed

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        """Hold back the next request for ``delay`` seconds.

        An existing window is only ever extended, never shortened.
        """
        if delay <= 0:
            return
        until = time.time() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        remaining = self._throttle_until - time.time()
        if remaining > 0:
            await asyncio.sleep(remaining)
        self._throttle_until = None

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                delay = hook(response)
                if inspect.isawaitable(delay):
                    delay = await delay
            except Exception:
                logger.warning("response_hook_failed", exc_info=True)
                continue
            if delay:
                self.set_throttle(float(delay))

    @staticmethod
    def _retry_after(response: aiohttp.ClientResponse) -> float:
        value = response.headers.get("Retry-After")
        try:
            return float(value) if value is not None else DEFAULT_RETRY_AFTER
        except ValueError:
            return DEFAULT_RETRY_AFTER

    def _resolve(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(self, request: HTTPRequest) -> HTTPResponse:
        """Send a request and return status, headers and raw body.

        Non-2xx statuses are returned, not raised; deciding what they mean
        is the caller's job.

        Raises:
            TransportError: On connection failures and timeouts
        """
        url = self._resolve(request.url)
        kwargs: dict[str, Any] = {
            "params": request.params,
            "headers": request.headers,
            "allow_redirects": request.allow_redirects,
        }
        if request.json is not None:
            kwargs["json"] = request.json
        elif request.body is not None:
            kwargs["data"] = request.body

        attempt = 0
        while True:
            await self._wait_for_throttle()
            try:
                async with self.session.request(request.method, url, **kwargs) as response:
                    await self._run_hooks(response)
                    if (
                        response.status in RATE_LIMIT_STATUSES
                        and attempt < self.max_rate_limit_retries
                    ):
                        attempt += 1
                        delay = self._retry_after(response)
                        logger.info(
                            "rate_limited",
                            extra={"url": url, "retry_after": delay, "attempt": attempt},
                        )
                        self.set_throttle(delay)
                        continue
                    body = await response.read()
                    return HTTPResponse(
                        status=response.status,
                        body=body,
                        headers=dict(response.headers),
                        url=str(response.url),
                    )
            except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                raise TransportError(
                    f"{request.method} {url} failed: {exc!r}", url=url, cause=exc
                ) from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
