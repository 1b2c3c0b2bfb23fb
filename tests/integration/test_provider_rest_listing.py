"""Integration tests for listing, quota and chunked upload against live services.

Each provider needs its access token in the environment
(``BOX_ACCESS_TOKEN``, ``GOOGLE_DRIVE_ACCESS_TOKEN``, ``BAIDU_PAN_ACCESS_TOKEN``);
providers without one are skipped.
"""

import os
import uuid

import pytest

from drivelink import Capability, create_provider

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_DRIVELINK_NETWORK_TESTS") != "1",
    reason="Requires network access to live storage services",
)

PROVIDERS = [
    ("box", "BOX_ACCESS_TOKEN", "0"),
    ("google_drive", "GOOGLE_DRIVE_ACCESS_TOKEN", "root"),
    ("baidu_pan", "BAIDU_PAN_ACCESS_TOKEN", "/"),
]


def token_for(env_var: str) -> str:
    token = os.environ.get(env_var)
    if not token:
        pytest.skip(f"{env_var} not set")
    return token


class TestRESTListingIntegration:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,env_var,root", PROVIDERS)
    async def test_list_root(self, name, env_var, root):
        async with create_provider(name, token_for(env_var)) as provider:
            items = await provider.list_all(root)

        assert isinstance(items, list)
        for item in items:
            assert item.name
            assert item.path

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,env_var,root", PROVIDERS)
    async def test_storage_properties(self, name, env_var, root):
        async with create_provider(name, token_for(env_var)) as provider:
            if not provider.supports(Capability.STORAGE_INFO):
                pytest.skip(f"{name} has no quota endpoint")
            volume = await provider.storage_properties()

        assert volume.usage >= 0


class TestChunkedUploadIntegration:
    @pytest.mark.asyncio
    # Box only opens upload sessions for files of 20 MB and more
    @pytest.mark.parametrize(
        "name,env_var,root,size",
        [(*PROVIDERS[0], 21 * 1024 * 1024), (*PROVIDERS[1], 300 * 1024)],
    )
    async def test_upload_then_remove(self, name, env_var, root, size):
        payload = os.urandom(size)
        target = f"{root}/drivelink-{uuid.uuid4().hex}.bin"

        async with create_provider(name, token_for(env_var)) as provider:
            handle = provider.upload_data(target, payload)
            file_id = await handle.wait()

            assert file_id
            assert handle.uploaded_bytes == len(payload)
            await provider.remove(file_id)
