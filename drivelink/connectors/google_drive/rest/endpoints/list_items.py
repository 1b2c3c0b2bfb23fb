"""Google Drive folder listing endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from drivelink.connectors.google_drive.config import LIST_FIELDS, PAGE_SIZE
from drivelink.connectors.google_drive.models import parse_entry
from drivelink.core.exceptions import BadServerResponseError
from drivelink.models import FileObject
from drivelink.runtime.messages import HTTPResponse
from drivelink.runtime.pagination import PageResult
from drivelink.runtime.rest import PageAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Children of the folder id in ``path``, trashed entries excluded."""
    query: dict[str, Any] = {
        "q": f"'{params['path']}' in parents and trashed = false",
        "fields": LIST_FIELDS,
        "pageSize": PAGE_SIZE,
    }
    if params.get("cursor") is not None:
        query["pageToken"] = params["cursor"]
    return query


SPEC = RestEndpointSpec(
    id="list_items",
    method="GET",
    build_path=lambda params: "/files",
    build_query=build_query,
)


class Adapter(PageAdapter):
    def parse_page(self, response: HTTPResponse, params: dict[str, Any]) -> PageResult[FileObject]:
        data = response.json()
        files = data.get("files") if isinstance(data, dict) else None
        if not isinstance(files, list):
            raise BadServerResponseError(
                "file listing without files", url=response.url, path=params.get("path")
            )
        items = [obj for obj in (parse_entry(entry) for entry in files) if obj is not None]
        return PageResult(items=items, next_token=data.get("nextPageToken") or None)
