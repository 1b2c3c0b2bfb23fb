"""Box REST connector."""

from .provider import BoxRESTConnector
from .upload import BoxUploadProtocol

__all__ = ["BoxRESTConnector", "BoxUploadProtocol"]
