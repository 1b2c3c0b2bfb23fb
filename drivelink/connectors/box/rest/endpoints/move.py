"""Box file move/rename endpoint (``PUT /files/{id}``).

``to_path`` is ``"<folder_id>/<new_name>"``.
"""

from __future__ import annotations

from typing import Any

from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

from ..upload import split_target


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    folder_id, name = split_target(params["to_path"])
    return {"parent": {"id": folder_id}, "name": name}


SPEC = RestEndpointSpec(
    id="move",
    method="PUT",
    build_path=lambda params: f"/files/{params['path']}",
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
