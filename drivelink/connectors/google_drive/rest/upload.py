"""Google Drive resumable upload protocol.

    POST /files?uploadType=resumable  -> session URI in the Location header
    PUT  <session URI>                -> one part per request
         308 Resume Incomplete        -> Range header names what the server
                                         holds; resume right after it
         200 / 201                    -> file resource of the finished upload
    DELETE <session URI>              -> abort

The client picks the part size, so ``UploadOptions.part_size`` is honoured
after rounding down to the 256 KiB granularity Drive requires.
"""

from __future__ import annotations

from drivelink.connectors.google_drive.config import (
    CHUNK_GRANULARITY,
    DEFAULT_PART_SIZE,
    UPLOAD_URL,
)
from drivelink.connectors.google_drive.errors import map_server_error
from drivelink.core.exceptions import BadServerResponseError, DriveError
from drivelink.runtime.messages import HTTPRequest, HTTPResponse
from drivelink.runtime.upload import (
    Continuation,
    PartAccepted,
    PartCompleted,
    SessionCreated,
    TransferRange,
    UploadOptions,
    UploadProtocol,
    UploadTarget,
    parse_byte_range,
)

RESUME_INCOMPLETE = 308


def resolve_part_size(options: UploadOptions) -> int:
    if options.part_size is None:
        return DEFAULT_PART_SIZE
    return max(options.part_size // CHUNK_GRANULARITY, 1) * CHUNK_GRANULARITY


def split_target(target_path: str) -> tuple[str | None, str]:
    """``"<parent_id>/<name>"`` or a bare ``"<name>"`` for the Drive root."""
    parent, sep, name = target_path.rpartition("/")
    if not name:
        raise DriveError(f"upload target has no file name: {target_path!r}", path=target_path)
    return (parent or None) if sep else None, name


class GoogleDriveUploadProtocol(UploadProtocol):
    def __init__(self, upload_url: str = UPLOAD_URL) -> None:
        self._upload_url = upload_url.rstrip("/")

    def build_create_session_request(
        self, target_path: str, total_size: int, options: UploadOptions
    ) -> HTTPRequest:
        parent, name = split_target(target_path)
        metadata: dict[str, object] = {"name": name}
        if parent is not None:
            metadata["parents"] = [parent]
        return HTTPRequest(
            method="POST",
            url=f"{self._upload_url}/files",
            params={"uploadType": "resumable"},
            headers={
                "X-Upload-Content-Type": "application/octet-stream",
                "X-Upload-Content-Length": str(total_size),
            },
            json=metadata,
        )

    def parse_create_session_response(
        self, response: HTTPResponse, options: UploadOptions
    ) -> SessionCreated:
        location = response.header("Location")
        if not location:
            raise BadServerResponseError("resumable session without Location header")
        return SessionCreated(session_handle=location, part_size=resolve_part_size(options))

    def build_part_request(
        self, target: UploadTarget, range_: TransferRange, data: bytes
    ) -> HTTPRequest:
        # 308 must reach the parser instead of being followed
        return HTTPRequest(
            method="PUT",
            url=target.session_handle,
            headers={"Content-Range": range_.content_range(target.total_size)},
            body=data,
            allow_redirects=False,
        )

    def parse_part_response(self, response: HTTPResponse) -> PartAccepted | PartCompleted:
        if response.status == RESUME_INCOMPLETE:
            received = response.header("Range")
            if not received:
                # Nothing persisted yet
                return PartAccepted(continuation=Continuation(0))
            held = parse_byte_range(received)
            if held.upper_bound is None:
                raise BadServerResponseError(f"open-ended Range header {received!r}")
            return PartAccepted(continuation=Continuation(held.upper_bound))
        if response.status in (200, 201):
            return PartCompleted(completion_id=response.json()["id"])
        raise BadServerResponseError(f"unexpected status {response.status} for upload part")

    def build_cancel_request(self, target: UploadTarget) -> HTTPRequest:
        return HTTPRequest(method="DELETE", url=target.session_handle)

    def map_server_error(self, status_code: int, body: bytes, path: str | None) -> DriveError:
        return map_server_error(status_code, body, path)
