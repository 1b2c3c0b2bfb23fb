"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation and default headers.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from drivelink.runtime.rest import HTTPRequest, HTTPResponse, RESTTransport


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        transport = RESTTransport(base_url="https://api.example.com", timeout=5.0)
        assert transport._http.base_url == "https://api.example.com"
        assert transport._http.timeout.total == 5.0

    def test_add_response_hook(self):
        transport = RESTTransport(base_url="https://api.example.com")
        hook = MagicMock()

        transport.add_response_hook(hook)

        assert hook in transport._http._response_hooks

    @pytest.mark.asyncio
    async def test_send_stamps_default_headers(self):
        transport = RESTTransport(headers={"Authorization": "Bearer t"})
        transport._http.request = AsyncMock(return_value=HTTPResponse(status=200))

        await transport.send(HTTPRequest("GET", "/x", headers={"Accept": "application/json"}))

        sent = transport._http.request.call_args.args[0]
        assert sent.headers == {"Authorization": "Bearer t", "Accept": "application/json"}

    @pytest.mark.asyncio
    async def test_request_headers_win_over_defaults(self):
        transport = RESTTransport(headers={"Content-Type": "application/json"})
        transport._http.request = AsyncMock(return_value=HTTPResponse(status=200))

        await transport.send(
            HTTPRequest("PUT", "/x", headers={"Content-Type": "application/octet-stream"})
        )

        sent = transport._http.request.call_args.args[0]
        assert sent.headers["Content-Type"] == "application/octet-stream"

    @pytest.mark.asyncio
    async def test_send_without_defaults_passes_request_through(self):
        transport = RESTTransport()
        transport._http.request = AsyncMock(return_value=HTTPResponse(status=204))
        request = HTTPRequest("DELETE", "/x")

        response = await transport.send(request)

        assert response.status == 204
        transport._http.request.assert_called_once_with(request)

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        transport = RESTTransport(base_url="https://api.example.com")
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_called_once()
