"""Box REST connector.

Architecture:
    Endpoint specs and adapters come from the endpoint registry; uploads
    are driven by BoxUploadProtocol. The access token is stamped onto every
    request by the transport.
"""

from __future__ import annotations

from typing import ClassVar

from drivelink.connectors.box.config import API_URL, UPLOAD_URL
from drivelink.connectors.box.errors import map_server_error
from drivelink.core import Capability
from drivelink.runtime.rest import RESTDriveProvider, RESTTransport

from .endpoints import _ENDPOINT_REGISTRY
from .upload import BoxUploadProtocol


class BoxRESTConnector(RESTDriveProvider):
    """Box provider: folder listing, chunked upload, delete, move and quota."""

    capabilities: ClassVar[frozenset[Capability]] = frozenset(
        {
            Capability.LIST,
            Capability.UPLOAD,
            Capability.REMOVE,
            Capability.STORAGE_INFO,
            Capability.MOVE,
        }
    )

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = API_URL,
        upload_url: str = UPLOAD_URL,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Box REST connector.

        Args:
            access_token: OAuth2 bearer token
            base_url: Metadata API root
            upload_url: Chunked upload API root
            timeout: Total per-request timeout in seconds
        """
        transport = RESTTransport(
            base_url=base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=timeout,
        )
        super().__init__(
            "box",
            transport=transport,
            endpoints=_ENDPOINT_REGISTRY,
            error_mapper=map_server_error,
            upload_protocol=BoxUploadProtocol(upload_url),
        )
