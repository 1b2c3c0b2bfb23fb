"""Box connector implementation."""

from .errors import BoxError
from .rest.provider import BoxRESTConnector
from .rest.upload import BoxUploadProtocol

__all__ = ["BoxError", "BoxRESTConnector", "BoxUploadProtocol"]
