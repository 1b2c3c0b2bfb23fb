"""Baidu Pan download link endpoint (``filemetas`` with ``dlink=1``).

The entry is addressed by its ``fs_id``, not by path. The returned link
only works when fetched with the same access token.
"""

from __future__ import annotations

from typing import Any

from drivelink.connectors.baidu_pan.errors import check_errno
from drivelink.connectors.baidu_pan.models import parse_entry
from drivelink.core.exceptions import BadServerResponseError
from drivelink.models import PublicLink
from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "method": "filemetas",
        "fsids": f"[{params['path']}]",
        "dlink": 1,
        "access_token": params["access_token"],
    }


SPEC = RestEndpointSpec(
    id="public_link",
    method="GET",
    build_path=lambda params: "/xpan/multimedia",
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> PublicLink:
        data = check_errno(response, params.get("path"))
        entries = data.get("list")
        entry = entries[0] if isinstance(entries, list) and entries else None
        dlink = entry.get("dlink") if isinstance(entry, dict) else None
        if not isinstance(dlink, str) or not dlink:
            raise BadServerResponseError("file metadata without dlink", path=params.get("path"))
        return PublicLink(url=dlink, file=parse_entry(entry))
