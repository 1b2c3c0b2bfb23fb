"""Unit tests for the Google Drive connector."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from support import json_response

from drivelink.connectors.google_drive import (
    GoogleDriveError,
    GoogleDriveRESTConnector,
    GoogleDriveUploadProtocol,
)
from drivelink.connectors.google_drive.config import (
    CHUNK_GRANULARITY,
    DEFAULT_PART_SIZE,
    ITEM_FIELDS,
)
from drivelink.connectors.google_drive.errors import map_server_error
from drivelink.connectors.google_drive.models import parse_entry
from drivelink.connectors.google_drive.rest.upload import resolve_part_size, split_target
from drivelink.core import Capability, FileType, UnsupportedOperationError
from drivelink.core.exceptions import BadServerResponseError
from drivelink.runtime.messages import HTTPResponse
from drivelink.runtime.upload import Continuation, PartAccepted, PartCompleted, UploadOptions

SESSION_URI = "https://www.googleapis.com/upload/drive/v3/files?upload_id=xyz"


def make_connector(*responses) -> tuple[GoogleDriveRESTConnector, AsyncMock]:
    connector = GoogleDriveRESTConnector("g-token")
    request = AsyncMock(side_effect=list(responses))
    connector._transport._http.request = request
    return connector, request


def sent(request: AsyncMock, index: int):
    return request.call_args_list[index].args[0]


class TestGoogleDriveModels:
    def test_folder_by_mime_type(self):
        obj = parse_entry(
            {"id": "F", "name": "Photos", "mimeType": "application/vnd.google-apps.folder"}
        )
        assert obj.is_directory
        assert obj.size == -1

    def test_size_is_decimal_string(self):
        obj = parse_entry({"id": "f", "name": "a.bin", "size": "2048", "mimeType": "x/y"})
        assert obj.type == FileType.REGULAR
        assert obj.size == 2048
        assert obj.mime_type == "x/y"


class TestGoogleDriveListing:
    @pytest.mark.asyncio
    async def test_next_page_token(self):
        connector, request = make_connector(
            json_response({"files": [{"id": "1", "name": "a"}], "nextPageToken": "T1"}),
            json_response({"files": [{"id": "2", "name": "b"}]}),
        )

        items = await connector.list_all("root")

        assert [item.id for item in items] == ["1", "2"]
        first, second = sent(request, 0), sent(request, 1)
        assert first.params["q"] == "'root' in parents and trashed = false"
        assert "pageToken" not in first.params
        assert second.params["pageToken"] == "T1"
        assert first.headers["Authorization"] == "Bearer g-token"

    @pytest.mark.asyncio
    async def test_error_body_message(self):
        connector, _ = make_connector(
            json_response({"error": {"code": 404, "message": "File not found: x"}}, status=404)
        )

        with pytest.raises(GoogleDriveError) as exc_info:
            await connector.list_all("x")

        assert exc_info.value.server_description == "File not found: x"


class TestGoogleDriveOneShotEndpoints:
    @pytest.mark.asyncio
    async def test_storage_quota(self):
        connector, request = make_connector(
            json_response({"storageQuota": {"limit": "16106127360", "usage": "512"}})
        )

        volume = await connector.storage_properties()

        assert volume.total_capacity == 16106127360
        assert volume.usage == 512
        assert sent(request, 0).params == {"fields": "storageQuota"}

    @pytest.mark.asyncio
    async def test_unlimited_quota(self):
        connector, _ = make_connector(json_response({"storageQuota": {"usage": "1"}}))
        volume = await connector.storage_properties()
        assert volume.total_capacity == -1

    @pytest.mark.asyncio
    async def test_remove(self):
        connector, request = make_connector(HTTPResponse(status=204))
        await connector.remove("abc")
        assert (sent(request, 0).method, sent(request, 0).url) == ("DELETE", "/files/abc")

    @pytest.mark.asyncio
    async def test_create_folder(self):
        connector, request = make_connector(
            json_response(
                {"id": "F9", "name": "Reports", "mimeType": "application/vnd.google-apps.folder"}
            )
        )

        folder = await connector.create_folder("root/Reports/")

        call = sent(request, 0)
        assert (call.method, call.url) == ("POST", "/files")
        assert call.json == {
            "name": "Reports",
            "mimeType": "application/vnd.google-apps.folder",
            "parents": ["root"],
        }
        assert call.params == {"fields": ITEM_FIELDS}
        assert folder.is_directory
        assert folder.id == "F9"

    @pytest.mark.asyncio
    async def test_copy(self):
        connector, request = make_connector(
            json_response({"id": "C1", "name": "copy.txt", "size": "4", "mimeType": "text/plain"})
        )

        copied = await connector.copy("F1", "P2/copy.txt")

        call = sent(request, 0)
        assert (call.method, call.url) == ("POST", "/files/F1/copy")
        assert call.json == {"name": "copy.txt", "parents": ["P2"]}
        assert copied.id == "C1"
        assert copied.size == 4

    @pytest.mark.asyncio
    async def test_copy_with_bare_name_keeps_parent(self):
        connector, request = make_connector(json_response({"id": "C2", "name": "b.txt"}))
        await connector.copy("F1", "b.txt")
        assert sent(request, 0).json == {"name": "b.txt"}

    @pytest.mark.asyncio
    async def test_copy_response_without_id(self):
        connector, _ = make_connector(json_response({"name": "b.txt"}))
        with pytest.raises(BadServerResponseError):
            await connector.copy("F1", "b.txt")

    @pytest.mark.asyncio
    async def test_move_and_links_unsupported(self):
        connector, request = make_connector()
        assert connector.supports(Capability.COPY)
        assert not connector.supports(Capability.MOVE)
        with pytest.raises(UnsupportedOperationError):
            await connector.move("F1", "P2/a.txt")
        with pytest.raises(UnsupportedOperationError):
            await connector.public_link("F1")
        with pytest.raises(UnsupportedOperationError):
            await connector.account_info()
        request.assert_not_called()


class TestGoogleDriveUploadProtocol:
    def test_part_size_rounded_to_granularity(self):
        assert resolve_part_size(UploadOptions()) == DEFAULT_PART_SIZE
        assert resolve_part_size(UploadOptions(part_size=CHUNK_GRANULARITY + 5)) == (
            CHUNK_GRANULARITY
        )
        assert resolve_part_size(UploadOptions(part_size=10)) == CHUNK_GRANULARITY

    def test_split_target(self):
        assert split_target("parent/name.txt") == ("parent", "name.txt")
        assert split_target("name.txt") == (None, "name.txt")

    def test_missing_location_header(self):
        with pytest.raises(BadServerResponseError):
            GoogleDriveUploadProtocol().parse_create_session_response(
                HTTPResponse(status=200), UploadOptions()
            )

    def test_resume_incomplete_with_range(self):
        response = HTTPResponse(status=308, headers={"Range": "bytes=0-99999"})
        outcome = GoogleDriveUploadProtocol().parse_part_response(response)
        assert outcome == PartAccepted(continuation=Continuation(100000))

    def test_resume_incomplete_without_range_restarts(self):
        outcome = GoogleDriveUploadProtocol().parse_part_response(HTTPResponse(status=308))
        assert outcome == PartAccepted(continuation=Continuation(0))

    def test_finished_upload(self):
        outcome = GoogleDriveUploadProtocol().parse_part_response(
            json_response({"id": "file-9", "name": "a"}, status=201)
        )
        assert outcome == PartCompleted(completion_id="file-9")


class TestGoogleDriveUpload:
    @pytest.mark.asyncio
    async def test_resumable_upload_follows_server_range(self):
        total = 300_000
        connector, request = make_connector(
            HTTPResponse(status=200, headers={"Location": SESSION_URI}),
            HTTPResponse(status=308, headers={"Range": "bytes=0-99999"}),
            json_response({"id": "g1"}),
        )
        progress: list[tuple[int, int]] = []

        handle = connector.upload_data(
            "parentId/video.mp4",
            bytes(total),
            options=UploadOptions(part_size=CHUNK_GRANULARITY),
            on_progress=lambda done, size: progress.append((done, size)),
        )

        assert await handle.wait() == "g1"
        create = sent(request, 0)
        assert create.params == {"uploadType": "resumable"}
        assert create.json == {"name": "video.mp4", "parents": ["parentId"]}
        assert create.headers["X-Upload-Content-Length"] == "300000"
        first, second = sent(request, 1), sent(request, 2)
        assert first.url == SESSION_URI
        assert first.allow_redirects is False
        assert first.headers["Content-Range"] == f"bytes 0-{CHUNK_GRANULARITY - 1}/{total}"
        assert second.headers["Content-Range"] == f"bytes 100000-{total - 1}/{total}"
        assert len(second.body) == total - 100000
        assert progress == [(100000, total), (total, total)]

    @pytest.mark.asyncio
    async def test_server_error_during_part(self):
        connector, _ = make_connector(
            HTTPResponse(status=200, headers={"Location": SESSION_URI}),
            json_response({"error": {"message": "Backend Error"}}, status=503),
        )

        handle = connector.upload_data("p/a.bin", b"abc")

        with pytest.raises(GoogleDriveError) as exc_info:
            await handle.wait()
        assert exc_info.value.status_code == 503


def test_map_server_error_string_error():
    error = map_server_error(401, b'{"error": "invalid_token"}', None)
    assert error.server_description == "invalid_token"
