"""Box JSON to FileObject conversion."""

from __future__ import annotations

from typing import Any

from drivelink.core import FileType
from drivelink.models import FileObject

from .config import FOLDER_TYPE


def parse_entry(entry: Any) -> FileObject | None:
    """Convert one folder entry; entries without a name or id are skipped."""
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    entry_id = entry.get("id")
    if not isinstance(name, str) or not isinstance(entry_id, str) or not name:
        return None
    size = entry.get("size")
    return FileObject(
        name=name,
        path=entry_id,
        id=entry_id,
        type=FileType.DIRECTORY if entry.get("type") == FOLDER_TYPE else FileType.REGULAR,
        size=int(size) if isinstance(size, int | float) else -1,
        modified_date=entry.get("modified_at"),
        creation_date=entry.get("created_at"),
        entry_tag=entry.get("etag"),
        file_hash=entry.get("sha1"),
    )
