"""Google Drive quota endpoint."""

from __future__ import annotations

from typing import Any

from drivelink.models import VolumeInfo
from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

SPEC = RestEndpointSpec(
    id="storage_info",
    method="GET",
    build_path=lambda params: "/about",
    build_query=lambda params: {"fields": "storageQuota"},
)


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return -1


class Adapter(ResponseAdapter):
    """Quota values arrive as decimal strings; ``limit`` is absent for unlimited plans."""

    def parse(self, response: Any, params: dict[str, Any]) -> VolumeInfo:
        quota = response.get("storageQuota") if isinstance(response, dict) else None
        quota = quota or {}
        return VolumeInfo(
            total_capacity=_as_int(quota.get("limit")),
            usage=_as_int(quota.get("usage")),
        )
