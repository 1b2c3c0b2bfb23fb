"""Baidu Pan JSON to FileObject conversion."""

from __future__ import annotations

from typing import Any

from drivelink.core import FileType
from drivelink.models import FileObject


def parse_entry(entry: Any) -> FileObject | None:
    """Convert one ``list`` or ``filemetas`` record; timestamps are Unix seconds."""
    if not isinstance(entry, dict):
        return None
    # filemetas records carry "filename" instead of "server_filename"
    name = entry.get("server_filename") or entry.get("filename")
    path = entry.get("path")
    if not isinstance(name, str) or not isinstance(path, str) or not name or not path:
        return None
    fs_id = entry.get("fs_id")
    size = entry.get("size")
    return FileObject(
        name=name,
        path=path,
        id=str(fs_id) if fs_id is not None else None,
        type=FileType.DIRECTORY if entry.get("isdir") == 1 else FileType.REGULAR,
        size=size if isinstance(size, int) else -1,
        modified_date=entry.get("server_mtime"),
        creation_date=entry.get("server_ctime"),
        file_hash=entry.get("md5"),
    )
