"""Box server error mapping."""

from __future__ import annotations

from drivelink.core.exceptions import ProviderError
from drivelink.runtime.rest.errors import build_provider_error, decode_error_body


class BoxError(ProviderError):
    """Error reported by the Box API."""


def map_server_error(status_code: int, body: bytes, path: str | None) -> ProviderError:
    """Build an error from a Box error body (``{"type": "error", "message": ...}``)."""
    data = decode_error_body(body)
    if data is not None:
        description = data.get("message") or data.get("code")
    else:
        description = body.decode("utf-8", errors="replace") or None
    return build_provider_error(BoxError, status_code, path, description)
