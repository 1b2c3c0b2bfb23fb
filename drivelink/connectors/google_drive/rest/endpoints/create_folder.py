"""Google Drive folder creation endpoint."""

from __future__ import annotations

from typing import Any

from drivelink.connectors.google_drive.config import FOLDER_MIME_TYPE, ITEM_FIELDS
from drivelink.connectors.google_drive.models import parse_entry
from drivelink.core.exceptions import BadServerResponseError
from drivelink.models import FileObject
from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

from ..upload import split_target


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """``"<parent_id>/<name>"``; a trailing slash is ignored, no parent means root."""
    parent, name = split_target(params["path"].rstrip("/"))
    body: dict[str, Any] = {"name": name, "mimeType": FOLDER_MIME_TYPE}
    if parent is not None:
        body["parents"] = [parent]
    return body


SPEC = RestEndpointSpec(
    id="create_folder",
    method="POST",
    build_path=lambda params: "/files",
    build_query=lambda params: {"fields": ITEM_FIELDS},
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> FileObject:
        created = parse_entry(response)
        if created is None:
            raise BadServerResponseError("created folder without id", path=params.get("path"))
        return created
