"""Data structures describing a chunked upload.

This module defines the byte ranges, session target, mutable per-upload
state and the outcomes a provider protocol reports back to the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...core.enums import UploadPhase


@dataclass(frozen=True)
class TransferRange:
    """Half-open byte range ``[lower_bound, upper_bound)`` of one part."""

    lower_bound: int
    upper_bound: int

    def __post_init__(self) -> None:
        if self.lower_bound < 0 or self.upper_bound <= self.lower_bound:
            raise ValueError(f"invalid transfer range [{self.lower_bound}, {self.upper_bound})")

    @property
    def length(self) -> int:
        return self.upper_bound - self.lower_bound

    def content_range(self, total_size: int) -> str:
        """Value for a ``Content-Range`` header (inclusive end, as HTTP wants it)."""
        return f"bytes {self.lower_bound}-{self.upper_bound - 1}/{total_size}"

    def __str__(self) -> str:
        return f"[{self.lower_bound}, {self.upper_bound})"


@dataclass(frozen=True)
class Continuation:
    """Next range the server expects.

    ``upper_bound`` is None when the server only reports where to resume
    from, not where the part should end.
    """

    lower_bound: int
    upper_bound: int | None = None


@dataclass
class UploadTarget:
    """Server session an upload is bound to.

    Attributes:
        total_size: Payload size in bytes (> 0)
        part_size: Server-assigned part size, clipped to ``total_size``
        session_handle: Opaque session identifier (id, URL, ...)
        context: Per-upload scratch space owned by the provider protocol
    """

    total_size: int
    part_size: int
    session_handle: Any
    context: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.total_size <= 0:
            raise ValueError("total_size must be positive")
        self.revise_part_size(self.part_size)

    def revise_part_size(self, part_size: int) -> None:
        if part_size <= 0:
            raise ValueError("part_size must be positive")
        self.part_size = min(part_size, self.total_size)


@dataclass
class UploadState:
    """Mutable record owned by exactly one upload session."""

    total_size: int
    target: UploadTarget | None = None
    uploaded_so_far: int = 0
    current_range: TransferRange | None = None
    cancelled: bool = False
    phase: UploadPhase = UploadPhase.IDLE
    receipts: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class UploadOptions:
    """Caller options for one upload.

    Attributes:
        part_size: Part size to use when the protocol lets the client choose
        operation: Free-form label carried into log records
    """

    part_size: int | None = None
    operation: str = "upload"


@dataclass(frozen=True)
class SessionCreated:
    session_handle: Any
    part_size: int


@dataclass(frozen=True)
class PartAccepted:
    """Server took the part and wants more.

    ``continuation`` overrides the locally computed next range; ``part_size``
    revises the session part size; ``receipt`` is kept for the commit step.
    """

    continuation: Continuation | None = None
    part_size: int | None = None
    receipt: Any = None


@dataclass(frozen=True)
class PartCompleted:
    """Server assembled the file; the upload is done."""

    completion_id: str | None = None


PartOutcome = PartAccepted | PartCompleted
