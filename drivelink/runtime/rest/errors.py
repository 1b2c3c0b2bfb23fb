"""Helpers shared by the per-connector server error mappers."""

from __future__ import annotations

import json
from typing import Any

from ...core.exceptions import ProviderError, RateLimitError


def decode_error_body(body: bytes) -> dict[str, Any] | None:
    """Best-effort JSON decode of an error body; None when it is not an object."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def build_provider_error(
    error_cls: type[ProviderError],
    status_code: int,
    path: str | None,
    description: str | None,
) -> ProviderError:
    """Instantiate ``error_cls`` for a failed request, or RateLimitError for 429."""
    message = f"HTTP {status_code}"
    if description:
        message = f"{message}: {description}"
    if status_code == 429:
        return RateLimitError(message, path=path)
    return error_cls(message, status_code, path=path, server_description=description)
