"""Unit tests for BaseDriveProvider capability gating."""

from __future__ import annotations

from typing import ClassVar

import pytest

from drivelink.core import BaseDriveProvider, Capability, UnsupportedOperationError
from drivelink.runtime.upload import bytes_source


class ListOnlyProvider(BaseDriveProvider):
    capabilities: ClassVar[frozenset[Capability]] = frozenset({Capability.LIST})

    def __init__(self) -> None:
        super().__init__("list_only")
        self.closed = False

    async def list_all(self, path: str):
        return []

    async def close(self) -> None:
        self.closed = True


class TestBaseDriveProvider:
    def test_supports(self):
        provider = ListOnlyProvider()
        assert provider.supports(Capability.LIST)
        assert not provider.supports(Capability.UPLOAD)

    def test_require_raises_for_missing_capability(self):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            ListOnlyProvider().require(Capability.REMOVE)
        assert exc_info.value.provider == "list_only"

    def test_upload_unsupported_by_default(self):
        with pytest.raises(UnsupportedOperationError):
            ListOnlyProvider().upload("a/b", bytes_source(b"x"), 1)

    @pytest.mark.asyncio
    async def test_optional_async_operations_unsupported_by_default(self):
        provider = ListOnlyProvider()
        with pytest.raises(UnsupportedOperationError):
            await provider.remove("/a")
        with pytest.raises(UnsupportedOperationError):
            await provider.storage_properties()

    @pytest.mark.asyncio
    async def test_file_management_unsupported_by_default(self):
        provider = ListOnlyProvider()
        calls = [
            (Capability.CREATE_FOLDER, provider.create_folder("root/new")),
            (Capability.COPY, provider.copy("a", "root/b")),
            (Capability.MOVE, provider.move("a", "root/b")),
            (Capability.PUBLIC_LINK, provider.public_link("a")),
            (Capability.ACCOUNT_INFO, provider.account_info()),
        ]
        for capability, call in calls:
            with pytest.raises(UnsupportedOperationError) as exc_info:
                await call
            assert exc_info.value.capability == capability

    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        async with ListOnlyProvider() as provider:
            assert not provider.closed
        assert provider.closed
