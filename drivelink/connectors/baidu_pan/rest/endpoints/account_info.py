"""Baidu Pan account endpoint (``nas?method=uinfo``)."""

from __future__ import annotations

from typing import Any

from drivelink.connectors.baidu_pan.errors import check_errno
from drivelink.models import AccountInfo
from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

# uinfo vip_type values
VIP_PLANS = {0: "normal", 1: "vip", 2: "svip"}

SPEC = RestEndpointSpec(
    id="account_info",
    method="GET",
    build_path=lambda params: "/xpan/nas",
    build_query=lambda params: {"method": "uinfo", "access_token": params["access_token"]},
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> AccountInfo:
        data = check_errno(response, None)
        uk = data.get("uk")
        return AccountInfo(
            user_id=str(uk) if uk is not None else None,
            name=data.get("baidu_name"),
            display_name=data.get("netdisk_name"),
            avatar_url=data.get("avatar_url"),
            plan=VIP_PLANS.get(data.get("vip_type")),
        )
