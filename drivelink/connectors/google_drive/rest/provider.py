"""Google Drive REST connector."""

from __future__ import annotations

from typing import ClassVar

from drivelink.connectors.google_drive.config import API_URL, UPLOAD_URL
from drivelink.connectors.google_drive.errors import map_server_error
from drivelink.core import Capability
from drivelink.runtime.rest import RESTDriveProvider, RESTTransport

from .endpoints import _ENDPOINT_REGISTRY
from .upload import GoogleDriveUploadProtocol


class GoogleDriveRESTConnector(RESTDriveProvider):
    """Google Drive provider.

    Paths are Drive file ids: ``list_all`` takes a folder id (``"root"``
    for My Drive), ``remove`` and ``copy`` a file id, and upload targets,
    new folders and copies are named ``"<parent_id>/<name>"``.
    """

    capabilities: ClassVar[frozenset[Capability]] = frozenset(
        {
            Capability.LIST,
            Capability.UPLOAD,
            Capability.REMOVE,
            Capability.STORAGE_INFO,
            Capability.CREATE_FOLDER,
            Capability.COPY,
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
        transport = RESTTransport(
            base_url=base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=timeout,
        )
        super().__init__(
            "google_drive",
            transport=transport,
            endpoints=_ENDPOINT_REGISTRY,
            error_mapper=map_server_error,
            upload_protocol=GoogleDriveUploadProtocol(upload_url),
        )
