"""Box folder listing endpoint definition and adapter.

Box pages folder items by numeric offset; the cursor handed around by the
paginator is that offset rendered as a string.
"""

from __future__ import annotations

from typing import Any

from drivelink.connectors.box.config import LIST_FIELDS, PAGE_LIMIT
from drivelink.connectors.box.models import parse_entry
from drivelink.core.exceptions import BadServerResponseError
from drivelink.models import FileObject
from drivelink.runtime.messages import HTTPResponse
from drivelink.runtime.pagination import PageResult
from drivelink.runtime.rest import PageAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"/folders/{params['path']}/items"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    query: dict[str, Any] = {"fields": LIST_FIELDS, "limit": PAGE_LIMIT}
    if params.get("cursor") is not None:
        query["offset"] = params["cursor"]
    return query


SPEC = RestEndpointSpec(
    id="list_items",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(PageAdapter):
    """Adapter for parsing a Box folder items page."""

    def parse_page(self, response: HTTPResponse, params: dict[str, Any]) -> PageResult[FileObject]:
        data = response.json()
        entries = data.get("entries") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise BadServerResponseError(
                "folder listing without entries", url=response.url, path=params.get("path")
            )

        items = [obj for obj in (parse_entry(entry) for entry in entries) if obj is not None]

        offset = int(data.get("offset") or 0)
        limit = int(data.get("limit") or PAGE_LIMIT)
        total = int(data.get("total_count") or 0)
        next_offset = offset + limit
        next_token = str(next_offset) if entries and next_offset < total else None
        return PageResult(items=items, next_token=next_token)
