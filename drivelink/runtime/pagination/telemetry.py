"""Structured logging for paginated listings."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    listing_id: str,
    page_index: int,
    items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    logger.debug(
        "page_fetched",
        extra={
            "listing_id": listing_id,
            "page_index": page_index,
            "items": items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_listing_complete(*, listing_id: str, pages: int, total_items: int) -> None:
    logger.info(
        "listing_complete",
        extra={
            "listing_id": listing_id,
            "pages": pages,
            "total_items": total_items,
        },
    )


def log_listing_error(
    *,
    listing_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
    partial_items: int,
) -> None:
    """Log the error that ended a listing.

    Args:
        listing_id: Listing identifier (usually the endpoint id)
        page_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Exception message
        partial_items: Records collected before the failure
    """
    logger.error(
        "listing_error",
        extra={
            "listing_id": listing_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
            "partial_items": partial_items,
        },
    )
