"""Baidu Pan REST connector.

Baidu takes the access token as a query parameter instead of a header, and
addresses entries by absolute slash paths (download links take the
``fs_id`` instead). It has no chunked upload session API here, so
``upload`` raises UnsupportedOperationError.
"""

from __future__ import annotations

from typing import Any, ClassVar

from drivelink.connectors.baidu_pan.config import API_URL
from drivelink.connectors.baidu_pan.errors import map_server_error
from drivelink.core import Capability
from drivelink.runtime.rest import RESTDriveProvider, RESTTransport

from .endpoints import _ENDPOINT_REGISTRY


class BaiduPanRESTConnector(RESTDriveProvider):
    capabilities: ClassVar[frozenset[Capability]] = frozenset(
        {
            Capability.LIST,
            Capability.REMOVE,
            Capability.MOVE,
            Capability.PUBLIC_LINK,
            Capability.ACCOUNT_INFO,
        }
    )

    def __init__(self, access_token: str, *, base_url: str = API_URL, timeout: float = 30.0):
        self._access_token = access_token
        super().__init__(
            "baidu_pan",
            transport=RESTTransport(base_url=base_url, timeout=timeout),
            endpoints=_ENDPOINT_REGISTRY,
            error_mapper=map_server_error,
        )

    def _params(self, params: dict[str, Any]) -> dict[str, Any]:
        return {**params, "access_token": self._access_token}
