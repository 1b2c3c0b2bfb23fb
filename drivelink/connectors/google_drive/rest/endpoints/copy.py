"""Google Drive copy endpoint.

``path`` is the source file id; ``to_path`` names the copy as
``"<parent_id>/<name>"`` (a bare name keeps the source's parent).
"""

from __future__ import annotations

from typing import Any

from drivelink.connectors.google_drive.config import ITEM_FIELDS
from drivelink.connectors.google_drive.models import parse_entry
from drivelink.core.exceptions import BadServerResponseError
from drivelink.models import FileObject
from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

from ..upload import split_target


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    parent, name = split_target(params["to_path"])
    body: dict[str, Any] = {"name": name}
    if parent is not None:
        body["parents"] = [parent]
    return body


SPEC = RestEndpointSpec(
    id="copy",
    method="POST",
    build_path=lambda params: f"/files/{params['path']}/copy",
    build_query=lambda params: {"fields": ITEM_FIELDS},
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> FileObject:
        copied = parse_entry(response)
        if copied is None:
            raise BadServerResponseError("copy response without id", path=params.get("path"))
        return copied
