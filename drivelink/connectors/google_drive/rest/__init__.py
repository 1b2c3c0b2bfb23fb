"""Google Drive REST connector."""

from .provider import GoogleDriveRESTConnector
from .upload import GoogleDriveUploadProtocol

__all__ = ["GoogleDriveRESTConnector", "GoogleDriveUploadProtocol"]
