"""Google Drive JSON to FileObject conversion."""

from __future__ import annotations

from typing import Any

from drivelink.core import FileType
from drivelink.models import FileObject

from .config import FOLDER_MIME_TYPE


def parse_entry(entry: Any) -> FileObject | None:
    """Convert one ``files`` resource; entries without a name or id are skipped.

    Drive reports ``size`` as a decimal string and omits it for folders and
    native Google documents.
    """
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    file_id = entry.get("id")
    if not isinstance(name, str) or not isinstance(file_id, str) or not name:
        return None
    mime_type = entry.get("mimeType")
    try:
        size = int(entry.get("size", -1))
    except (TypeError, ValueError):
        size = -1
    return FileObject(
        name=name,
        path=file_id,
        id=file_id,
        type=FileType.DIRECTORY if mime_type == FOLDER_MIME_TYPE else FileType.REGULAR,
        size=size,
        modified_date=entry.get("modifiedTime"),
        creation_date=entry.get("createdTime"),
        file_hash=entry.get("md5Checksum"),
        mime_type=mime_type,
    )
