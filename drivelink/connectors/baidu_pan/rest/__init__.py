"""Baidu Pan REST connector."""

from .provider import BaiduPanRESTConnector

__all__ = ["BaiduPanRESTConnector"]
