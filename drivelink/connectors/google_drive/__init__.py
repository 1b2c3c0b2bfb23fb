"""Google Drive connector implementation."""

from .errors import GoogleDriveError
from .rest.provider import GoogleDriveRESTConnector
from .rest.upload import GoogleDriveUploadProtocol

__all__ = ["GoogleDriveError", "GoogleDriveRESTConnector", "GoogleDriveUploadProtocol"]
