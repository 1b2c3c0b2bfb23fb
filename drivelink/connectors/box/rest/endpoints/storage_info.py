"""Box account quota endpoint."""

from __future__ import annotations

from typing import Any

from drivelink.models import VolumeInfo
from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

SPEC = RestEndpointSpec(
    id="storage_info",
    method="GET",
    build_path=lambda params: "/users/me",
    build_query=lambda params: {"fields": "space_amount,space_used"},
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> VolumeInfo:
        data = response if isinstance(response, dict) else {}
        amount = data.get("space_amount")
        used = data.get("space_used")
        return VolumeInfo(
            total_capacity=int(amount) if amount is not None else -1,
            usage=int(used) if used is not None else 0,
        )
