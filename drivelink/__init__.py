"""drivelink - Async cloud storage client with resumable chunked uploads."""

from .connectors.baidu_pan import BaiduPanError, BaiduPanRESTConnector
from .connectors.box import BoxError, BoxRESTConnector
from .connectors.google_drive import GoogleDriveError, GoogleDriveRESTConnector
from .core import (
    BadServerResponseError,
    BaseDriveProvider,
    Capability,
    DataSourceError,
    DriveError,
    FileType,
    PaginationProtocolError,
    ProviderError,
    RateLimitError,
    TransportError,
    UnsupportedOperationError,
    UploadCancelledError,
    UploadPhase,
)
from .models import AccountInfo, FileObject, PublicLink, VolumeInfo
from .registration import available_providers, create_provider
from .runtime.pagination import PageResult, Paginator
from .runtime.rest import RESTDriveProvider
from .runtime.upload import (
    ChunkedUploadSession,
    UploadHandle,
    UploadOptions,
    bytes_source,
    file_source,
)

__version__ = "0.1.0"

__all__ = [
    # Providers
    "BaseDriveProvider",
    "RESTDriveProvider",
    "BoxRESTConnector",
    "GoogleDriveRESTConnector",
    "BaiduPanRESTConnector",
    "create_provider",
    "available_providers",
    # Models
    "AccountInfo",
    "FileObject",
    "PublicLink",
    "VolumeInfo",
    # Enums
    "Capability",
    "FileType",
    "UploadPhase",
    # Engines
    "PageResult",
    "Paginator",
    "ChunkedUploadSession",
    "UploadHandle",
    "UploadOptions",
    "bytes_source",
    "file_source",
    # Exceptions
    "DriveError",
    "BadServerResponseError",
    "TransportError",
    "ProviderError",
    "RateLimitError",
    "PaginationProtocolError",
    "DataSourceError",
    "UploadCancelledError",
    "UnsupportedOperationError",
    "BoxError",
    "GoogleDriveError",
    "BaiduPanError",
]
