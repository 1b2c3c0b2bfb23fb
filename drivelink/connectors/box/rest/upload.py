"""Box chunked upload protocol.

Box upload sessions live on a separate host. The flow is:

    POST /files/upload_sessions            -> session id + server part size
    PUT  /files/upload_sessions/{id}       -> one part per request, with a
                                              Content-Range and the part's
                                              SHA-1 in a Digest header
    POST /files/upload_sessions/{id}/commit -> the assembled file
    DELETE /files/upload_sessions/{id}     -> abort

Each accepted part comes back as a ``part`` record; those records are the
receipts the commit request lists. The commit also carries a SHA-1 of the
whole file, accumulated from the parts as they are sent.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any

from drivelink.connectors.box.config import UPLOAD_URL
from drivelink.connectors.box.errors import map_server_error
from drivelink.core.exceptions import BadServerResponseError, DriveError
from drivelink.runtime.messages import HTTPRequest, HTTPResponse
from drivelink.runtime.upload import (
    PartAccepted,
    PartCompleted,
    SessionCreated,
    TransferRange,
    UploadOptions,
    UploadProtocol,
    UploadTarget,
    parse_byte_range,
)


def split_target(target_path: str) -> tuple[str, str]:
    """Split ``"<folder_id>/<file_name>"`` into its two halves.

    Raises:
        DriveError: If the path does not name both a folder id and a file name
    """
    folder_id, sep, file_name = target_path.partition("/")
    if not sep or not folder_id or not file_name:
        raise DriveError(
            f"Box target must be '<folder_id>/<file_name>', got {target_path!r}",
            path=target_path,
        )
    return folder_id, file_name


def _digest_header(digest: bytes) -> str:
    return "sha=" + base64.b64encode(digest).decode("ascii")


def sha1_digest(data: bytes) -> str:
    return _digest_header(hashlib.sha1(data).digest())


class WholeFileDigest:
    """SHA-1 of the payload, fed with parts in the order they are sent.

    When the server rewinds, the resent part overlaps bytes already hashed
    and only its unseen tail is added. A part that starts past the hashed
    prefix leaves a hole, after which no digest can be produced.
    """

    def __init__(self) -> None:
        self._sha1 = hashlib.sha1()
        self.hashed = 0
        self.broken = False

    def update(self, lower_bound: int, data: bytes) -> None:
        if lower_bound > self.hashed:
            self.broken = True
        if self.broken:
            return
        tail = data[self.hashed - lower_bound :]
        self._sha1.update(tail)
        self.hashed += len(tail)

    def header(self, total_size: int) -> str | None:
        if self.broken or self.hashed != total_size:
            return None
        return _digest_header(self._sha1.digest())


def unique_parts(receipts: list[Any]) -> list[Any]:
    """One receipt per part offset.

    A part resent after the server rewound yields a second receipt for the
    same offset; the later one replaces the earlier in place.
    """
    parts: list[Any] = []
    positions: dict[int, int] = {}
    for receipt in receipts:
        offset = receipt.get("offset") if isinstance(receipt, dict) else None
        if isinstance(offset, int):
            if offset in positions:
                parts[positions[offset]] = receipt
                continue
            positions[offset] = len(parts)
        parts.append(receipt)
    return parts


class BoxUploadProtocol(UploadProtocol):
    def __init__(self, upload_url: str = UPLOAD_URL) -> None:
        self._upload_url = upload_url.rstrip("/")

    def _session_url(self, target: UploadTarget) -> str:
        return f"{self._upload_url}/files/upload_sessions/{target.session_handle}"

    def build_create_session_request(
        self, target_path: str, total_size: int, options: UploadOptions
    ) -> HTTPRequest:
        folder_id, file_name = split_target(target_path)
        return HTTPRequest(
            method="POST",
            url=f"{self._upload_url}/files/upload_sessions",
            json={"folder_id": folder_id, "file_size": total_size, "file_name": file_name},
        )

    def parse_create_session_response(
        self, response: HTTPResponse, options: UploadOptions
    ) -> SessionCreated:
        # Box dictates the part size; a client-side hint is ignored
        data = response.json()
        return SessionCreated(session_handle=data["id"], part_size=int(data["part_size"]))

    def build_part_request(
        self, target: UploadTarget, range_: TransferRange, data: bytes
    ) -> HTTPRequest:
        target.context.setdefault("digest", WholeFileDigest()).update(range_.lower_bound, data)
        return HTTPRequest(
            method="PUT",
            url=self._session_url(target),
            headers={
                "Content-Type": "application/octet-stream",
                "Content-Range": range_.content_range(target.total_size),
                "Digest": sha1_digest(data),
            },
            body=data,
        )

    def parse_part_response(self, response: HTTPResponse) -> PartAccepted | PartCompleted:
        data = response.json()
        if not isinstance(data, dict):
            raise BadServerResponseError("upload part response is not an object")
        receipt = data.get("part")
        ranges = data.get("nextExpectedRanges")
        if ranges:
            return PartAccepted(continuation=parse_byte_range(ranges[0]), receipt=receipt)
        if receipt is not None:
            return PartAccepted(receipt=receipt)
        if isinstance(data.get("id"), str):
            return PartCompleted(completion_id=data["id"])
        raise BadServerResponseError("upload part response carries neither part nor id")

    def build_commit_request(self, target: UploadTarget, receipts: list[Any]) -> HTTPRequest:
        digest = target.context.get("digest")
        value = digest.header(target.total_size) if digest is not None else None
        return HTTPRequest(
            method="POST",
            url=f"{self._session_url(target)}/commit",
            headers={"Digest": value} if value else None,
            json={"parts": unique_parts(receipts)},
        )

    def parse_commit_response(self, response: HTTPResponse) -> PartCompleted:
        if response.status == 202:
            # Parts still being processed server side
            raise BadServerResponseError(
                f"commit not ready, retry after {response.header('Retry-After')}s"
            )
        entries = response.json()["entries"]
        return PartCompleted(completion_id=entries[0]["id"])

    def build_cancel_request(self, target: UploadTarget) -> HTTPRequest:
        return HTTPRequest(method="DELETE", url=self._session_url(target))

    def map_server_error(self, status_code: int, body: bytes, path: str | None) -> DriveError:
        return map_server_error(status_code, body, path)
