"""Test doubles shared across the unit tests.

ScriptedTransport stands in for RESTTransport: it records every request and
answers from a script of canned responses, exceptions, or async callables.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from typing import Any

from drivelink.runtime.messages import HTTPRequest, HTTPResponse


def json_response(
    data: Any, status: int = 200, headers: dict[str, str] | None = None
) -> HTTPResponse:
    return HTTPResponse(
        status=status,
        body=json.dumps(data).encode("utf-8"),
        headers=headers or {},
        url="https://api.example.com/scripted",
    )


class ScriptedTransport:
    def __init__(self, script: list[Any]) -> None:
        self._script = list(script)
        self.requests: list[HTTPRequest] = []
        self.closed = False

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        self.requests.append(request)
        if not self._script:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        item = self._script.pop(0)
        if isinstance(item, BaseException):
            raise item
        if callable(item):
            return await item(request)
        return item

    async def close(self) -> None:
        self.closed = True


async def block_forever(request: HTTPRequest) -> HTTPResponse:
    await asyncio.Event().wait()
    raise AssertionError("unreachable")


async def wait_until(predicate: Callable[[], bool], *, turns: int = 2000) -> None:
    # Part reads run in a worker thread, so poll on a short timer
    for _ in range(turns):
        if predicate():
            return
        await asyncio.sleep(0.001)
    raise AssertionError("condition not reached")
