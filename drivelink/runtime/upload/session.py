"""Resumable chunked upload engine.

Architecture:
    One ChunkedUploadSession drives one upload through the provider's
    create-session / send-part / (commit) protocol:

        IDLE -> SESSION_CREATED -> PART_IN_FLIGHT -> ... -> COMPLETED
                         any non-terminal state -> FAILED | CANCELLED

    Parts are sent strictly one after another because the range of part
    N+1 may come from the server's answer to part N. Whenever the server
    names the next range it expects, that range is used as-is instead of
    the locally computed one.

    The session runs as an asyncio task held by the UploadHandle returned
    from ``start``; the handle is what keeps the upload alive. Network
    calls go through a per-session OperationRegistry so cancellation can
    abort whatever is on the wire.

Completion:
    Exactly one of ``on_complete`` / ``on_failure`` fires per upload.
    Cancellation is reported through ``on_failure`` with an
    UploadCancelledError.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from time import perf_counter
from typing import TYPE_CHECKING, Any

from ...core.enums import UploadPhase
from ...core.exceptions import (
    BadServerResponseError,
    DataSourceError,
    DriveError,
    UploadCancelledError,
)
from ..messages import HTTPRequest, HTTPResponse, with_retry_after
from .definitions import (
    PartAccepted,
    PartCompleted,
    TransferRange,
    UploadOptions,
    UploadState,
    UploadTarget,
)
from .operations import OperationRegistry
from .protocol import UploadProtocol
from .ranges import initial_range, next_range, resolve_continuation
from .sources import DataProvider
from .telemetry import (
    log_part_completed,
    log_session_created,
    log_upload_cancelled,
    log_upload_complete,
    log_upload_failed,
)

if TYPE_CHECKING:
    from ..rest.transport import RESTTransport

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
CompleteCallback = Callable[[str | None], None]
FailureCallback = Callable[[DriveError], None]


class UploadHandle:
    """Caller's grip on a running upload.

    Holding the handle keeps the upload alive. ``wait()`` resolves to the
    completion id or raises the terminal error; callbacks passed to
    ``start`` fire either way.
    """

    def __init__(
        self, session: ChunkedUploadSession, outcome: asyncio.Future[str | None]
    ) -> None:
        self._session = session
        self._outcome = outcome
        self._task: asyncio.Task[None] | None = None

    @property
    def total_bytes(self) -> int:
        return self._session.state.total_size

    @property
    def uploaded_bytes(self) -> int:
        return self._session.state.uploaded_so_far

    @property
    def fraction_completed(self) -> float:
        return self.uploaded_bytes / self.total_bytes

    @property
    def phase(self) -> UploadPhase:
        return self._session.state.phase

    @property
    def done(self) -> bool:
        return self._outcome.done()

    @property
    def error(self) -> DriveError | None:
        if not self._outcome.done():
            return None
        return self._outcome.exception()  # type: ignore[return-value]

    def cancel(self) -> None:
        """Abort the upload. Safe to call repeatedly or after it finished."""
        self._session.cancel()

    async def wait(self) -> str | None:
        return await asyncio.shield(self._outcome)


class ChunkedUploadSession:
    """Drives a single upload against a provider's upload-session protocol."""

    def __init__(
        self,
        transport: RESTTransport,
        protocol: UploadProtocol,
        *,
        options: UploadOptions | None = None,
    ) -> None:
        self._transport = transport
        self._protocol = protocol
        self._options = options or UploadOptions()
        self._operations = OperationRegistry()
        self._state: UploadState | None = None
        self._handle: UploadHandle | None = None
        self._path = ""
        self._on_progress: ProgressCallback | None = None
        self._on_complete: CompleteCallback | None = None
        self._on_failure: FailureCallback | None = None

    @property
    def state(self) -> UploadState:
        if self._state is None:
            raise RuntimeError("upload session has not been started")
        return self._state

    @property
    def operations(self) -> OperationRegistry:
        return self._operations

    def start(
        self,
        target_path: str,
        data_provider: DataProvider,
        total_size: int,
        *,
        on_progress: ProgressCallback | None = None,
        on_complete: CompleteCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> UploadHandle:
        """Begin the upload and return its handle.

        Must be called from a running event loop. Nothing is sent before
        this returns; the session is created from the spawned task.

        Raises:
            ValueError: If ``total_size`` is not positive
            RuntimeError: If this session was already started
        """
        if total_size <= 0:
            raise ValueError(f"total_size must be positive, got {total_size}")
        if self._state is not None:
            raise RuntimeError("upload session already started")

        loop = asyncio.get_running_loop()
        self._state = UploadState(total_size=total_size)
        self._path = target_path
        self._on_progress = on_progress
        self._on_complete = on_complete
        self._on_failure = on_failure

        handle = UploadHandle(self, loop.create_future())
        handle._task = loop.create_task(self._run(data_provider))
        self._handle = handle
        return handle

    def cancel(self) -> None:
        state = self._state
        if state is None or state.phase.is_terminal:
            return
        state.cancelled = True
        self._operations.abort_all()
        if self._handle is not None and self._handle._task is not None:
            self._handle._task.cancel()
        self._abort(state)

    def _abort(self, state: UploadState) -> None:
        self._teardown(state)
        log_upload_cancelled(path=self._path, uploaded_so_far=state.uploaded_so_far)
        self._finish(
            UploadPhase.CANCELLED,
            error=UploadCancelledError(uploaded_so_far=state.uploaded_so_far, path=self._path),
        )

    async def _run(self, data_provider: DataProvider) -> None:
        state = self.state
        try:
            completion_id = await self._drive(state, data_provider)
        except asyncio.CancelledError:
            # Task cancelled by someone other than cancel()
            if not state.phase.is_terminal:
                state.cancelled = True
                self._abort(state)
            raise
        except DriveError as exc:
            self._fail(state, exc)
        except Exception as exc:
            logger.exception("upload_crashed", extra={"path": self._path})
            error = DriveError(f"upload aborted: {exc!r}", path=self._path)
            error.__cause__ = exc
            self._fail(state, error)
        else:
            log_upload_complete(
                path=self._path, total_size=state.total_size, completion_id=completion_id
            )
            self._finish(UploadPhase.COMPLETED, completion_id=completion_id)

    async def _drive(self, state: UploadState, data_provider: DataProvider) -> str | None:
        protocol = self._protocol
        response = await self._send(
            protocol.build_create_session_request(self._path, state.total_size, self._options)
        )
        created = self._parse(
            lambda raw: protocol.parse_create_session_response(raw, self._options), response
        )
        if created.part_size is None or created.part_size <= 0:
            raise BadServerResponseError(
                f"server assigned invalid part size {created.part_size!r}", path=self._path
            )
        target = UploadTarget(
            total_size=state.total_size,
            part_size=created.part_size,
            session_handle=created.session_handle,
        )
        state.target = target
        state.phase = UploadPhase.SESSION_CREATED
        log_session_created(
            path=self._path,
            total_size=target.total_size,
            part_size=target.part_size,
            operation=self._options.operation,
        )

        range_: TransferRange | None = initial_range(target.part_size, target.total_size)
        while range_ is not None:
            state.current_range = range_
            data = await self._read(data_provider, range_)

            state.phase = UploadPhase.PART_IN_FLIGHT
            started = perf_counter()
            response = await self._send(protocol.build_part_request(target, range_, data))
            outcome = self._parse(protocol.parse_part_response, response, range_)
            latency_ms = (perf_counter() - started) * 1000.0

            if isinstance(outcome, PartCompleted):
                self._confirm(state, range_, state.total_size, latency_ms=latency_ms)
                return outcome.completion_id

            if not isinstance(outcome, PartAccepted):
                raise BadServerResponseError(
                    f"unexpected part outcome {outcome!r}",
                    url=response.url,
                    range=range_,
                    path=self._path,
                )
            if outcome.receipt is not None:
                state.receipts.append(outcome.receipt)
            if outcome.part_size:
                target.revise_part_size(outcome.part_size)

            if outcome.continuation is not None:
                following = resolve_continuation(
                    outcome.continuation, target.part_size, target.total_size, url=response.url
                )
                self._confirm(
                    state, range_, following.lower_bound, latency_ms=latency_ms, continued=True
                )
                range_ = following
                continue

            self._confirm(
                state, range_, state.uploaded_so_far + range_.length, latency_ms=latency_ms
            )
            range_ = next_range(range_, target.part_size, target.total_size)

        return await self._commit(state, target)

    async def _commit(self, state: UploadState, target: UploadTarget) -> str | None:
        request = self._protocol.build_commit_request(target, list(state.receipts))
        if request is None:
            return None
        response = await self._send(request)
        completed = self._parse(self._protocol.parse_commit_response, response)
        return completed.completion_id

    async def _send(self, request: HTTPRequest) -> HTTPResponse:
        response = await self._operations.run(self._transport.send(request))
        if response.is_error:
            error = self._protocol.map_server_error(response.status, response.body, self._path)
            raise with_retry_after(error, response)
        return response

    def _parse(
        self,
        parser: Callable[[HTTPResponse], Any],
        response: HTTPResponse,
        range_: TransferRange | None = None,
    ) -> Any:
        try:
            return parser(response)
        except BadServerResponseError as exc:
            exc.url = exc.url or response.url
            exc.range = exc.range or range_
            exc.path = exc.path or self._path
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise BadServerResponseError(
                f"unexpected response: {exc!r}", url=response.url, range=range_, path=self._path
            ) from exc

    async def _read(self, data_provider: DataProvider, range_: TransferRange) -> bytes:
        # File reads block; keep them off the event loop
        try:
            data = await asyncio.to_thread(data_provider, range_)
        except DataSourceError:
            raise
        except Exception as exc:
            raise DataSourceError(
                f"data provider failed for {range_}: {exc!r}", range=range_, path=self._path
            ) from exc
        if len(data) != range_.length:
            raise DataSourceError(
                f"data provider returned {len(data)} bytes for {range_}",
                range=range_,
                path=self._path,
            )
        return data

    def _confirm(
        self,
        state: UploadState,
        range_: TransferRange,
        uploaded: int,
        *,
        latency_ms: float | None = None,
        continued: bool = False,
    ) -> None:
        state.uploaded_so_far = uploaded
        log_part_completed(
            path=self._path,
            range_=range_,
            uploaded_so_far=uploaded,
            total_size=state.total_size,
            continued=continued,
            latency_ms=latency_ms,
        )
        if self._on_progress is not None:
            self._invoke(self._on_progress, uploaded, state.total_size)

    def _teardown(self, state: UploadState) -> None:
        if state.target is None:
            return
        try:
            request = self._protocol.build_cancel_request(state.target)
        except DriveError as exc:
            logger.debug("upload_teardown_skipped", extra={"path": self._path, "error": str(exc)})
            return
        self._operations.detach(self._delete_session(request))

    async def _delete_session(self, request: HTTPRequest) -> None:
        try:
            await self._transport.send(request)
        except DriveError as exc:
            logger.debug("upload_teardown_failed", extra={"path": self._path, "error": str(exc)})

    def _fail(self, state: UploadState, error: DriveError) -> None:
        log_upload_failed(
            path=self._path,
            uploaded_so_far=state.uploaded_so_far,
            error_type=type(error).__name__,
            error_message=str(error),
        )
        self._finish(UploadPhase.FAILED, error=error)

    def _finish(
        self,
        phase: UploadPhase,
        *,
        completion_id: str | None = None,
        error: DriveError | None = None,
    ) -> None:
        state = self.state
        if state.phase.is_terminal:
            return
        state.phase = phase
        state.current_range = None

        outcome = self._handle._outcome if self._handle is not None else None
        if error is None:
            if outcome is not None:
                outcome.set_result(completion_id)
            if self._on_complete is not None:
                self._invoke(self._on_complete, completion_id)
            return

        if outcome is not None:
            outcome.set_exception(error)
            # Callers may rely on callbacks alone and never await the handle
            outcome.exception()
        if self._on_failure is not None:
            self._invoke(self._on_failure, error)

    def _invoke(self, callback: Callable[..., Any], *args: Any) -> None:
        try:
            callback(*args)
        except Exception:
            logger.exception("upload_callback_failed", extra={"path": self._path})
