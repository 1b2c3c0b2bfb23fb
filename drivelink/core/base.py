"""Base provider abstract class.

Architecture:
    This module defines the BaseDriveProvider abstract base class that all
    storage providers implement. It provides:
    - An abstract directory listing (every provider can list)
    - Capability-gated optional operations (upload, remove, storage info,
      folder creation, copy, move, download links, account info)
    - Async context manager support

Design Decisions:
    - Capability set instead of stubs: a provider declares what it
      implements; calling anything else raises UnsupportedOperationError
      rather than crashing or silently doing nothing.
    - No shared mutable state between operations: every listing and every
      upload owns its own state.

See Also:
    - RESTDriveProvider: Wires transport, paginator and upload session
    - drivelink.registration: Name-based provider factory
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from .enums import Capability
from .exceptions import UnsupportedOperationError

if TYPE_CHECKING:
    from ..models import AccountInfo, FileObject, PublicLink, VolumeInfo
    from ..runtime.upload import DataProvider, UploadHandle, UploadOptions
    from ..runtime.upload.session import CompleteCallback, FailureCallback, ProgressCallback


class BaseDriveProvider(ABC):
    """Abstract base class for all storage providers."""

    capabilities: ClassVar[frozenset[Capability]] = frozenset({Capability.LIST})

    def __init__(self, name: str) -> None:
        self.name = name

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def require(self, capability: Capability) -> None:
        """Raise UnsupportedOperationError unless ``capability`` is declared."""
        if not self.supports(capability):
            raise UnsupportedOperationError(capability, self.name)

    @abstractmethod
    async def list_all(self, path: str) -> list[FileObject]:
        """Return every entry of the directory at ``path``, across all pages."""
        pass

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
        """Start a chunked upload of ``total_size`` bytes to ``path``."""
        raise UnsupportedOperationError(Capability.UPLOAD, self.name)

    async def remove(self, path: str) -> None:
        raise UnsupportedOperationError(Capability.REMOVE, self.name)

    async def storage_properties(self) -> VolumeInfo:
        raise UnsupportedOperationError(Capability.STORAGE_INFO, self.name)

    async def create_folder(self, path: str) -> FileObject:
        """Create the folder ``path`` (``<parent>/<name>``) and return it."""
        raise UnsupportedOperationError(Capability.CREATE_FOLDER, self.name)

    async def copy(self, path: str, to_path: str) -> FileObject:
        raise UnsupportedOperationError(Capability.COPY, self.name)

    async def move(self, path: str, to_path: str) -> None:
        raise UnsupportedOperationError(Capability.MOVE, self.name)

    async def public_link(self, path: str) -> PublicLink:
        raise UnsupportedOperationError(Capability.PUBLIC_LINK, self.name)

    async def account_info(self) -> AccountInfo:
        raise UnsupportedOperationError(Capability.ACCOUNT_INFO, self.name)

    @abstractmethod
    async def close(self) -> None:
        """Close provider connections and cleanup resources."""
        pass

    async def __aenter__(self) -> BaseDriveProvider:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
