"""REST runtime abstractions."""

from ..messages import HTTPRequest, HTTPResponse
from .http_client import HTTPClient
from .provider import RESTDriveProvider
from .runner import PageAdapter, ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPRequest",
    "HTTPResponse",
    "RESTTransport",
    "RESTDriveProvider",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "PageAdapter",
]
