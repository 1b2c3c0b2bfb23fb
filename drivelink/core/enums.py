"""Core enumerations shared by the engines and all connectors.

Key Types:
    - FileType: Regular file vs directory
    - Capability: Operations a provider may or may not implement
    - UploadPhase: States of a chunked upload
"""

from enum import Enum


class FileType(str, Enum):
    """Kind of entry returned by a directory listing."""

    REGULAR = "regular"
    DIRECTORY = "directory"


class Capability(str, Enum):
    """Operations a provider can declare support for.

    Providers advertise a set of these instead of stubbing out methods they
    cannot serve; asking for anything outside the set raises
    ``UnsupportedOperationError``.
    """

    LIST = "list"
    UPLOAD = "upload"
    REMOVE = "remove"
    STORAGE_INFO = "storage_info"
    CREATE_FOLDER = "create_folder"
    COPY = "copy"
    MOVE = "move"
    PUBLIC_LINK = "public_link"
    ACCOUNT_INFO = "account_info"


class UploadPhase(str, Enum):
    """Lifecycle of a single chunked upload."""

    IDLE = "idle"
    SESSION_CREATED = "session_created"
    PART_IN_FLIGHT = "part_in_flight"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (UploadPhase.COMPLETED, UploadPhase.FAILED, UploadPhase.CANCELLED)
