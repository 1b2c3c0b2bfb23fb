"""Core components."""

from .base import BaseDriveProvider
from .enums import Capability, FileType, UploadPhase
from .exceptions import (
    BadServerResponseError,
    DataSourceError,
    DriveError,
    PaginationProtocolError,
    ProviderError,
    RateLimitError,
    TransportError,
    UnsupportedOperationError,
    UploadCancelledError,
)

__all__ = [
    "BaseDriveProvider",
    "Capability",
    "FileType",
    "UploadPhase",
    "DriveError",
    "BadServerResponseError",
    "TransportError",
    "ProviderError",
    "RateLimitError",
    "PaginationProtocolError",
    "DataSourceError",
    "UploadCancelledError",
    "UnsupportedOperationError",
]
