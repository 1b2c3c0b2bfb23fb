"""Baidu Pan server error mapping.

Baidu reports most failures inside a 200 response as a non-zero
``errno`` with an optional ``errmsg``; both paths end up as BaiduPanError.
"""

from __future__ import annotations

from typing import Any

from drivelink.core.exceptions import ProviderError
from drivelink.runtime.rest.errors import build_provider_error, decode_error_body


class BaiduPanError(ProviderError):
    """Error reported by the Baidu Pan API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        path: str | None = None,
        server_description: str | None = None,
        errno: int | None = None,
    ) -> None:
        super().__init__(
            message, status_code, path=path, server_description=server_description
        )
        self.errno = errno


def map_server_error(status_code: int, body: bytes, path: str | None) -> ProviderError:
    data = decode_error_body(body)
    if data is None:
        description = body.decode("utf-8", errors="replace") or None
        return build_provider_error(BaiduPanError, status_code, path, description)
    error = build_provider_error(
        BaiduPanError, status_code, path, data.get("errmsg") or data.get("error_description")
    )
    if isinstance(error, BaiduPanError):
        error.errno = data.get("errno")
    return error


def check_errno(data: Any, path: str | None) -> dict[str, Any]:
    """Return ``data`` when it is a success envelope.

    Raises:
        BaiduPanError: If the envelope carries a non-zero ``errno``
    """
    if not isinstance(data, dict):
        return {}
    errno = data.get("errno", 0)
    if errno:
        errmsg = data.get("errmsg")
        message = f"errno {errno}" + (f": {errmsg}" if errmsg else "")
        raise BaiduPanError(message, path=path, server_description=errmsg, errno=errno)
    return data
