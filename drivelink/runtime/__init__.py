"""Runtime engines: REST plumbing, paginated listing, chunked upload."""

from .messages import HTTPRequest, HTTPResponse
from .pagination import PageResult, Paginator
from .upload import ChunkedUploadSession, UploadHandle

__all__ = [
    "HTTPRequest",
    "HTTPResponse",
    "PageResult",
    "Paginator",
    "ChunkedUploadSession",
    "UploadHandle",
]
