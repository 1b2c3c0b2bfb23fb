"""Baidu Pan deletion through the filemanager endpoint.

Unlike the other endpoints, filemanager takes a form-encoded body.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlencode

from drivelink.connectors.baidu_pan.errors import check_errno
from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "method": "filemanager",
        "opera": "delete",
        "access_token": params["access_token"],
    }


def build_data(params: dict[str, Any]) -> bytes:
    form = {"async": 1, "filelist": json.dumps([params["path"]]), "ondup": "fail"}
    return urlencode(form).encode("utf-8")


SPEC = RestEndpointSpec(
    id="remove",
    method="POST",
    build_path=lambda params: "/xpan/file",
    build_query=build_query,
    build_headers=lambda params: {"Content-Type": "application/x-www-form-urlencoded"},
    build_data=build_data,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> None:
        check_errno(response, params.get("path"))
        return None
