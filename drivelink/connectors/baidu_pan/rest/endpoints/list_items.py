"""Baidu Pan directory listing endpoint definition and adapter.

Pages are addressed by a numeric ``start`` offset. A page shorter than the
requested limit is the last one.
"""

from __future__ import annotations

from typing import Any

from drivelink.connectors.baidu_pan.config import PAGE_LIMIT
from drivelink.connectors.baidu_pan.errors import check_errno
from drivelink.connectors.baidu_pan.models import parse_entry
from drivelink.core.exceptions import BadServerResponseError
from drivelink.models import FileObject
from drivelink.runtime.messages import HTTPResponse
from drivelink.runtime.pagination import PageResult
from drivelink.runtime.rest import PageAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "method": "list",
        "dir": params["path"],
        "start": int(params.get("cursor") or 0),
        "limit": PAGE_LIMIT,
        "access_token": params["access_token"],
    }


SPEC = RestEndpointSpec(
    id="list_items",
    method="GET",
    build_path=lambda params: "/xpan/file",
    build_query=build_query,
)


class Adapter(PageAdapter):
    def parse_page(self, response: HTTPResponse, params: dict[str, Any]) -> PageResult[FileObject]:
        data = check_errno(response.json(), params.get("path"))
        entries = data.get("list")
        if not isinstance(entries, list):
            raise BadServerResponseError(
                "directory listing without list", url=response.url, path=params.get("path")
            )
        items = [obj for obj in (parse_entry(entry) for entry in entries) if obj is not None]

        start = int(params.get("cursor") or 0)
        next_token = str(start + len(entries)) if len(entries) >= PAGE_LIMIT else None
        return PageResult(items=items, next_token=next_token)
