"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..runtime.upload.definitions import TransferRange
    from .enums import Capability


class DriveError(Exception):
    """Base exception for all library errors.

    Listing failures carry whatever records were collected before the
    failing page in ``partial_items``.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.partial_items: list[Any] = []


class BadServerResponseError(DriveError):
    """Server answered with a body that could not be understood."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        range: TransferRange | None = None,  # noqa: A002
        path: str | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.url = url
        self.range = range


class TransportError(DriveError):
    """Network-level failure raised by the HTTP stack."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause


class ProviderError(DriveError):
    """Error reported by the remote service itself."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        path: str | None = None,
        server_description: str | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.status_code = status_code
        self.server_description = server_description


class RateLimitError(ProviderError):
    """Provider rate limit exceeded.

    ``retry_after`` is the server's Retry-After in seconds, None when it sent none.
    """

    def __init__(
        self, message: str, retry_after: float | None = None, *, path: str | None = None
    ) -> None:
        super().__init__(message, status_code=429, path=path)
        self.retry_after = retry_after


class PaginationProtocolError(DriveError):
    """Server handed back a page token that was already requested."""

    def __init__(self, message: str, *, token: str, path: str | None = None) -> None:
        super().__init__(message, path=path)
        self.token = token


class DataSourceError(DriveError):
    """Byte source could not produce the data for a requested range."""

    def __init__(
        self,
        message: str,
        *,
        range: TransferRange | None = None,  # noqa: A002
        path: str | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.range = range


class UploadCancelledError(DriveError):
    """Upload was aborted by the caller."""

    def __init__(
        self,
        message: str = "upload cancelled",
        *,
        uploaded_so_far: int = 0,
        path: str | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.uploaded_so_far = uploaded_so_far


class UnsupportedOperationError(DriveError):
    """Provider does not implement the requested capability."""

    def __init__(self, capability: Capability, provider: str) -> None:
        super().__init__(f"{provider} does not support {capability.value}")
        self.capability = capability
        self.provider = provider
