"""Resumable chunked upload layer.

Architecture:
    - definitions.py: Ranges, session target, per-upload state, part outcomes
    - ranges.py: Part range arithmetic and continuation handling
    - sources.py: In-memory and file-backed data providers
    - protocol.py: UploadProtocol, the callbacks a connector supplies
    - operations.py: Per-session registry of in-flight network operations
    - session.py: ChunkedUploadSession and UploadHandle
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import (
    Continuation,
    PartAccepted,
    PartCompleted,
    SessionCreated,
    TransferRange,
    UploadOptions,
    UploadState,
    UploadTarget,
)
from .operations import OperationRegistry
from .protocol import UploadProtocol
from .ranges import (
    initial_range,
    iter_ranges,
    next_range,
    parse_byte_range,
    resolve_continuation,
)
from .session import ChunkedUploadSession, UploadHandle
from .sources import DataProvider, bytes_source, file_size, file_source

__all__ = [
    "ChunkedUploadSession",
    "Continuation",
    "DataProvider",
    "OperationRegistry",
    "PartAccepted",
    "PartCompleted",
    "SessionCreated",
    "TransferRange",
    "UploadHandle",
    "UploadOptions",
    "UploadProtocol",
    "UploadState",
    "UploadTarget",
    "bytes_source",
    "file_size",
    "file_source",
    "initial_range",
    "iter_ranges",
    "next_range",
    "parse_byte_range",
    "resolve_continuation",
]
