"""REST-backed provider base.

Architecture:
    RESTDriveProvider is the composition root for a connector: it owns the
    transport, resolves declarative endpoint specs through RestRunner, and
    hands the connector's UploadProtocol to a fresh ChunkedUploadSession
    for every upload. Connectors only supply endpoint specs, adapters, an
    upload protocol and a server error mapper.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from ...core.base import BaseDriveProvider
from ...core.enums import Capability
from ...core.exceptions import UnsupportedOperationError
from ...models import AccountInfo, FileObject, PublicLink, VolumeInfo
from ..pagination import Paginator
from ..upload import (
    ChunkedUploadSession,
    DataProvider,
    UploadHandle,
    UploadOptions,
    UploadProtocol,
    bytes_source,
    file_size,
    file_source,
)
from ..upload.session import CompleteCallback, FailureCallback, ProgressCallback
from .runner import PageAdapter, ResponseAdapter, RestEndpointSpec, RestRunner, ServerErrorMapper
from .transport import RESTTransport

EndpointRegistry = Mapping[str, tuple[RestEndpointSpec, type[ResponseAdapter]]]


class RESTDriveProvider(BaseDriveProvider):
    """Provider driven by endpoint specs and an upload protocol."""

    def __init__(
        self,
        name: str,
        *,
        transport: RESTTransport,
        endpoints: EndpointRegistry,
        error_mapper: ServerErrorMapper,
        upload_protocol: UploadProtocol | None = None,
    ) -> None:
        super().__init__(name)
        self._transport = transport
        self._endpoints = endpoints
        self._runner = RestRunner(transport, error_mapper=error_mapper)
        self._upload_protocol = upload_protocol

    def _resolve(self, endpoint_id: str) -> tuple[RestEndpointSpec, ResponseAdapter]:
        entry = self._endpoints.get(endpoint_id)
        if entry is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        spec, adapter_cls = entry
        return spec, adapter_cls()

    def _params(self, params: dict[str, Any]) -> dict[str, Any]:
        """Hook for connectors that carry credentials in request parameters."""
        return params

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Run a one-shot endpoint and return the adapter's parse result.

        Raises:
            ValueError: If endpoint_id is not registered for this connector
        """
        spec, adapter = self._resolve(endpoint_id)
        return await self._runner.run(spec=spec, adapter=adapter, params=self._params(params))

    def paginate(self, endpoint_id: str, params: dict[str, Any]) -> Paginator[Any]:
        spec, adapter = self._resolve(endpoint_id)
        if not isinstance(adapter, PageAdapter):
            raise ValueError(f"Endpoint {endpoint_id} is not paginated")
        return self._runner.paginate(spec=spec, adapter=adapter, params=self._params(params))

    async def list_all(self, path: str) -> list[FileObject]:
        """Return every entry under ``path``.

        Raises:
            DriveError: The first error hit; records fetched before it are in
                ``partial_items``
        """
        self.require(Capability.LIST)
        result = await self.paginate("list_items", {"path": path}).run_to_completion()
        return result.unwrap()

    def upload(
        self,
        path: str,
        data_provider: DataProvider,
        total_size: int,
        *,
        options: UploadOptions | None = None,
        on_progress: ProgressCallback | None = None,
        on_complete: CompleteCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> UploadHandle:
        """Start a chunked upload; see ChunkedUploadSession.start.

        Raises:
            UnsupportedOperationError: If the connector cannot upload
            ValueError: If ``total_size`` is not positive
        """
        self.require(Capability.UPLOAD)
        if self._upload_protocol is None:
            raise UnsupportedOperationError(Capability.UPLOAD, self.name)
        session = ChunkedUploadSession(self._transport, self._upload_protocol, options=options)
        return session.start(
            path,
            data_provider,
            total_size,
            on_progress=on_progress,
            on_complete=on_complete,
            on_failure=on_failure,
        )

    def upload_data(self, path: str, data: bytes, **kwargs: Any) -> UploadHandle:
        return self.upload(path, bytes_source(data), len(data), **kwargs)

    def upload_file(
        self, path: str, local_path: str | os.PathLike[str], **kwargs: Any
    ) -> UploadHandle:
        return self.upload(path, file_source(local_path), file_size(local_path), **kwargs)

    async def remove(self, path: str) -> None:
        self.require(Capability.REMOVE)
        await self.fetch("remove", {"path": path})

    async def storage_properties(self) -> VolumeInfo:
        self.require(Capability.STORAGE_INFO)
        return await self.fetch("storage_info", {})

    async def create_folder(self, path: str) -> FileObject:
        self.require(Capability.CREATE_FOLDER)
        return await self.fetch("create_folder", {"path": path})

    async def copy(self, path: str, to_path: str) -> FileObject:
        self.require(Capability.COPY)
        return await self.fetch("copy", {"path": path, "to_path": to_path})

    async def move(self, path: str, to_path: str) -> None:
        self.require(Capability.MOVE)
        await self.fetch("move", {"path": path, "to_path": to_path})

    async def public_link(self, path: str) -> PublicLink:
        self.require(Capability.PUBLIC_LINK)
        return await self.fetch("public_link", {"path": path})

    async def account_info(self) -> AccountInfo:
        self.require(Capability.ACCOUNT_INFO)
        return await self.fetch("account_info", {})

    async def close(self) -> None:
        await self._transport.close()
