"""Google Drive server error mapping."""

from __future__ import annotations

from drivelink.core.exceptions import ProviderError
from drivelink.runtime.rest.errors import build_provider_error, decode_error_body


class GoogleDriveError(ProviderError):
    """Error reported by the Google Drive API."""


def map_server_error(status_code: int, body: bytes, path: str | None) -> ProviderError:
    """Build an error from a Google error body (``{"error": {"message": ...}}``)."""
    data = decode_error_body(body)
    if data is not None:
        error = data.get("error")
        description = error.get("message") if isinstance(error, dict) else error
    else:
        description = body.decode("utf-8", errors="replace") or None
    return build_provider_error(GoogleDriveError, status_code, path, description)
