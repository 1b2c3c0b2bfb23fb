"""Baidu Pan connector implementation."""

from .errors import BaiduPanError
from .rest.provider import BaiduPanRESTConnector

__all__ = ["BaiduPanError", "BaiduPanRESTConnector"]
