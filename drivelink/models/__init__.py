"""Data models for remote drive entries.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True) so listings can be shared
    between callers without defensive copies.

Model Categories:
    - Entries: FileObject
    - Metadata: VolumeInfo, AccountInfo
    - Sharing: PublicLink
"""

from .account import AccountInfo
from .file_object import FileObject
from .link import PublicLink
from .volume import VolumeInfo

__all__ = [
    "AccountInfo",
    "FileObject",
    "PublicLink",
    "VolumeInfo",
]
