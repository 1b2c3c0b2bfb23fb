"""Common file-metadata model shared by every connector."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import FileType


class FileObject(BaseModel):
    """Path, identity and attributes of a remote file or directory.

    ``path`` is whatever the provider uses to address the entry: a folder
    id for Box, a file id for Google Drive, a slash path for Baidu Pan.
    """

    name: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1)
    id: str | None = None
    type: FileType = FileType.REGULAR
    size: int = -1
    modified_date: datetime | None = None
    creation_date: datetime | None = None
    entry_tag: str | None = None
    file_hash: str | None = None
    mime_type: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def is_directory(self) -> bool:
        return self.type == FileType.DIRECTORY
