"""Shareable download link model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .file_object import FileObject


class PublicLink(BaseModel):
    """Direct download URL for a file, with the file's metadata when known."""

    url: str = Field(..., min_length=1)
    file: FileObject | None = None
    expires_at: datetime | None = None

    model_config = ConfigDict(frozen=True)
