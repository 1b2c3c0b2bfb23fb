"""Google Drive deletion endpoint (bypasses the trash)."""

from __future__ import annotations

from typing import Any

from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

SPEC = RestEndpointSpec(
    id="remove",
    method="DELETE",
    build_path=lambda params: f"/files/{params['path']}",
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
