"""Precise unit tests for HTTPClient.

Tests focus on session management, throttling, response hooks, rate-limit
retries, and transport error wrapping.
"""

from __future__ import annotations

import asyncio
import time
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from drivelink.core.exceptions import TransportError
from drivelink.runtime.rest import HTTPClient, HTTPRequest


def make_response(status: int = 200, body: bytes = b"{}", headers: dict | None = None):
    response = AsyncMock()
    response.status = status
    response.headers = headers or {}
    response.url = "https://api.example.com/test"
    response.read = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def install_session(client: HTTPClient, *responses) -> MagicMock:
    mock_session = MagicMock()
    mock_session.closed = False  # Important: session property checks this
    mock_session.request = MagicMock(side_effect=list(responses))
    client._session = mock_session
    return mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client._response_hooks == []
        assert client._throttle_until is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        client.session
        await client.close()
        await client.close()  # Should not raise
        assert client.closed

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequest:
    """Test request building and response capture."""

    @pytest.mark.asyncio
    async def test_returns_status_headers_and_raw_body(self):
        client = HTTPClient()
        install_session(client, make_response(404, b'{"message": "x"}', {"X-Id": "1"}))

        response = await client.request(HTTPRequest("GET", "https://api.example.com/test"))

        assert response.status == 404
        assert response.body == b'{"message": "x"}'
        assert response.header("x-id") == "1"
        assert response.is_error

    @pytest.mark.asyncio
    async def test_relative_url_combined_with_base_url(self):
        client = HTTPClient(base_url="https://api.example.com")
        session = install_session(client, make_response())

        await client.request(HTTPRequest("GET", "/test"))

        args, _ = session.request.call_args
        assert args == ("GET", "https://api.example.com/test")

    @pytest.mark.asyncio
    async def test_absolute_url_not_combined(self):
        client = HTTPClient(base_url="https://api.example.com")
        session = install_session(client, make_response())

        await client.request(HTTPRequest("PUT", "https://upload.example.com/s1"))

        args, _ = session.request.call_args
        assert args == ("PUT", "https://upload.example.com/s1")

    @pytest.mark.asyncio
    async def test_raw_body_and_redirect_flag_forwarded(self):
        client = HTTPClient()
        session = install_session(client, make_response(308))

        await client.request(
            HTTPRequest("PUT", "https://u.example/s", body=b"abc", allow_redirects=False)
        )

        _, kwargs = session.request.call_args
        assert kwargs["data"] == b"abc"
        assert kwargs["allow_redirects"] is False
        assert "json" not in kwargs

    @pytest.mark.asyncio
    async def test_json_body_forwarded(self):
        client = HTTPClient()
        session = install_session(client, make_response())

        await client.request(HTTPRequest("POST", "https://a.example/s", json={"k": "v"}))

        _, kwargs = session.request.call_args
        assert kwargs["json"] == {"k": "v"}

    @pytest.mark.asyncio
    async def test_client_error_wrapped(self):
        client = HTTPClient()
        mock_session = MagicMock()
        mock_session.closed = False
        mock_session.request = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client._session = mock_session

        with pytest.raises(TransportError) as exc_info:
            await client.request(HTTPRequest("GET", "https://api.example.com/test"))

        assert isinstance(exc_info.value.cause, aiohttp.ClientConnectionError)
        assert exc_info.value.url == "https://api.example.com/test"

    @pytest.mark.asyncio
    async def test_timeout_wrapped(self):
        client = HTTPClient()
        mock_session = MagicMock()
        mock_session.closed = False
        mock_session.request = MagicMock(side_effect=asyncio.TimeoutError())
        client._session = mock_session

        with pytest.raises(TransportError):
            await client.request(HTTPRequest("GET", "https://api.example.com/test"))


class TestHTTPClientThrottling:
    """Test HTTPClient throttling functionality."""

    def test_set_throttle_zero_does_nothing(self):
        client = HTTPClient()
        client.set_throttle(5.0)
        original_throttle = client._throttle_until

        client.set_throttle(0.0)
        assert client._throttle_until == original_throttle

    def test_set_throttle_only_extends(self):
        client = HTTPClient()
        client.set_throttle(10.0)
        first_end = client._throttle_until

        client.set_throttle(1.0)
        assert client._throttle_until == first_end

    @pytest.mark.asyncio
    async def test_request_respects_throttle(self):
        client = HTTPClient()
        client.set_throttle(0.05)
        install_session(client, make_response())

        start = time.time()
        await client.request(HTTPRequest("GET", "https://api.example.com/test"))
        elapsed = time.time() - start

        # Allow small tolerance for timing variance
        assert elapsed >= 0.04, f"Expected at least 0.04s, got {elapsed:.6f}s"
        assert client._throttle_until is None


class TestHTTPClientResponseHooks:
    """Test HTTPClient response hooks."""

    @pytest.mark.asyncio
    async def test_response_hook_called(self):
        client = HTTPClient()
        hook = MagicMock(return_value=None)
        client.add_response_hook(hook)
        response = make_response()
        install_session(client, response)

        await client.request(HTTPRequest("GET", "https://api.example.com/test"))

        hook.assert_called_once_with(response)

    @pytest.mark.asyncio
    async def test_async_hook_delay_opens_throttle(self):
        client = HTTPClient()

        async def async_hook(response):
            await asyncio.sleep(0)
            return 2.0

        client.add_response_hook(async_hook)
        install_session(client, make_response())

        await client.request(HTTPRequest("GET", "https://api.example.com/test"))

        assert client._throttle_until is not None

    @pytest.mark.asyncio
    async def test_failing_hook_does_not_break_request(self):
        client = HTTPClient()

        def failing_hook(response):
            raise Exception("Hook error")

        client.add_response_hook(failing_hook)
        install_session(client, make_response(body=b'{"ok": true}'))

        response = await client.request(HTTPRequest("GET", "https://api.example.com/test"))
        assert response.json() == {"ok": True}


class TestHTTPClientRateLimiting:
    """Test HTTPClient rate limiting handling."""

    @pytest.mark.asyncio
    async def test_429_retried_after_retry_after(self):
        client = HTTPClient()
        session = install_session(
            client,
            make_response(429, b"", {"Retry-After": "0.01"}),
            make_response(200, b'{"data": "test"}'),
        )

        response = await client.request(HTTPRequest("GET", "https://api.example.com/test"))

        assert response.json() == {"data": "test"}
        assert session.request.call_count == 2

    @pytest.mark.asyncio
    async def test_429_returned_once_retries_exhausted(self):
        client = HTTPClient(max_rate_limit_retries=1)
        install_session(
            client,
            make_response(429, b"", {"Retry-After": "0"}),
            make_response(429, b'{"message": "slow down"}', {"Retry-After": "0"}),
        )

        response = await client.request(HTTPRequest("GET", "https://api.example.com/test"))

        assert response.status == 429
        assert response.body == b'{"message": "slow down"}'
