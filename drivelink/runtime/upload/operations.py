"""In-flight network operations owned by one upload session."""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


class OperationRegistry:
    """Maps operation ids to the tasks running them.

    Each entry lives only while its operation is running; it is removed the
    moment the operation finishes, however it finishes. Detached operations
    (fire-and-forget cleanup) are tracked separately so they are neither
    garbage collected mid-flight nor aborted with the rest.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._inflight: dict[int, asyncio.Task[Any]] = {}
        self._detached: set[asyncio.Task[Any]] = set()

    def __len__(self) -> int:
        return len(self._inflight)

    @property
    def detached(self) -> int:
        return len(self._detached)

    async def run(self, coro: Coroutine[Any, Any, T]) -> T:
        op_id = next(self._ids)
        task = asyncio.ensure_future(coro)
        self._inflight[op_id] = task
        try:
            return await task
        finally:
            self._inflight.pop(op_id, None)

    def abort_all(self) -> int:
        """Cancel every in-flight operation; returns how many were cancelled."""
        tasks = list(self._inflight.values())
        for task in tasks:
            task.cancel()
        return len(tasks)

    def detach(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        task = asyncio.ensure_future(coro)
        self._detached.add(task)
        task.add_done_callback(self._detached.discard)
        return task
