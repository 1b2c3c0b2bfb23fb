"""Provider side of the chunked upload contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ...core.exceptions import DriveError
from ..messages import HTTPRequest, HTTPResponse
from .definitions import (
    PartAccepted,
    PartCompleted,
    SessionCreated,
    TransferRange,
    UploadOptions,
    UploadTarget,
)


class UploadProtocol(ABC):
    """Callbacks a connector supplies to drive its upload-session API.

    Builders return requests, parsers turn successful responses (status
    below 400) into outcomes. Responses with status >= 400 never reach a
    parser; they go through ``map_server_error`` instead. Parsers may raise
    ``BadServerResponseError`` (or let ``KeyError``/``TypeError``/
    ``ValueError`` escape, which the engine reports the same way).
    """

    @abstractmethod
    def build_create_session_request(
        self, target_path: str, total_size: int, options: UploadOptions
    ) -> HTTPRequest: ...

    @abstractmethod
    def parse_create_session_response(
        self, response: HTTPResponse, options: UploadOptions
    ) -> SessionCreated: ...

    @abstractmethod
    def build_part_request(
        self, target: UploadTarget, range_: TransferRange, data: bytes
    ) -> HTTPRequest: ...

    @abstractmethod
    def parse_part_response(self, response: HTTPResponse) -> PartAccepted | PartCompleted: ...

    @abstractmethod
    def build_cancel_request(self, target: UploadTarget) -> HTTPRequest: ...

    @abstractmethod
    def map_server_error(self, status_code: int, body: bytes, path: str | None) -> DriveError: ...

    def build_commit_request(self, target: UploadTarget, receipts: list[Any]) -> HTTPRequest | None:
        """Request that finalizes the upload after its last byte; None if not needed."""
        return None

    def parse_commit_response(self, response: HTTPResponse) -> PartCompleted:
        return PartCompleted()
