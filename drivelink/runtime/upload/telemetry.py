"""Structured logging for chunked uploads."""

from __future__ import annotations

import logging

from .definitions import TransferRange

logger = logging.getLogger(__name__)


def log_session_created(*, path: str, total_size: int, part_size: int, operation: str) -> None:
    logger.info(
        "upload_session_created",
        extra={
            "path": path,
            "total_size": total_size,
            "part_size": part_size,
            "operation": operation,
        },
    )


def log_part_completed(
    *,
    path: str,
    range_: TransferRange,
    uploaded_so_far: int,
    total_size: int,
    continued: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a part the server confirmed.

    Args:
        path: Remote target path
        range_: Range that was sent
        uploaded_so_far: Bytes confirmed after this part
        total_size: Payload size
        continued: Whether the server supplied a continuation range
        latency_ms: Round-trip latency of the part request
    """
    logger.debug(
        "upload_part_completed",
        extra={
            "path": path,
            "lower_bound": range_.lower_bound,
            "upper_bound": range_.upper_bound,
            "uploaded_so_far": uploaded_so_far,
            "total_size": total_size,
            "continued": continued,
            "latency_ms": latency_ms,
        },
    )


def log_upload_complete(*, path: str, total_size: int, completion_id: str | None) -> None:
    logger.info(
        "upload_complete",
        extra={"path": path, "total_size": total_size, "completion_id": completion_id},
    )


def log_upload_failed(
    *, path: str, uploaded_so_far: int, error_type: str, error_message: str
) -> None:
    logger.error(
        "upload_failed",
        extra={
            "path": path,
            "uploaded_so_far": uploaded_so_far,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_upload_cancelled(*, path: str, uploaded_so_far: int) -> None:
    logger.info("upload_cancelled", extra={"path": path, "uploaded_so_far": uploaded_so_far})
