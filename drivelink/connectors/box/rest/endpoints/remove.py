"""Box file deletion endpoint."""

from __future__ import annotations

from typing import Any

from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"/files/{params['path']}"


SPEC = RestEndpointSpec(id="remove", method="DELETE", build_path=build_path)


class Adapter(ResponseAdapter):
    """Box answers a delete with 204 and no body."""

    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
