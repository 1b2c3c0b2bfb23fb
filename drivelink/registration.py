"""Provider registration utilities.

This module registers the bundled connectors with the global
ProviderRegistry and offers a name-based factory on top of it.
"""

from __future__ import annotations

from typing import Any

from drivelink.connectors.baidu_pan import BaiduPanRESTConnector
from drivelink.connectors.box import BoxRESTConnector
from drivelink.connectors.google_drive import GoogleDriveRESTConnector
from drivelink.core.base import BaseDriveProvider
from drivelink.runtime.provider_registry import ProviderRegistry, get_provider_registry

__all__ = [
    "register_box",
    "register_google_drive",
    "register_baidu_pan",
    "register_all",
    "create_provider",
    "available_providers",
]


def register_box(registry: ProviderRegistry | None = None) -> None:
    """Register the Box provider with the registry.

    Args:
        registry: Optional registry instance (defaults to global singleton)
    """
    if registry is None:
        registry = get_provider_registry()
    registry.register("box", BoxRESTConnector)


def register_google_drive(registry: ProviderRegistry | None = None) -> None:
    if registry is None:
        registry = get_provider_registry()
    registry.register("google_drive", GoogleDriveRESTConnector)


def register_baidu_pan(registry: ProviderRegistry | None = None) -> None:
    if registry is None:
        registry = get_provider_registry()
    registry.register("baidu_pan", BaiduPanRESTConnector)


def register_all(registry: ProviderRegistry | None = None) -> None:
    """Register every bundled provider that is not registered yet."""
    if registry is None:
        registry = get_provider_registry()
    for name, register in (
        ("box", register_box),
        ("google_drive", register_google_drive),
        ("baidu_pan", register_baidu_pan),
    ):
        if not registry.is_registered(name):
            register(registry)


def create_provider(
    name: str,
    access_token: str,
    *,
    registry: ProviderRegistry | None = None,
    **kwargs: Any,
) -> BaseDriveProvider:
    """Build a provider by name, e.g. ``create_provider("box", access_token=...)``.

    Raises:
        DriveError: If no provider is registered under ``name``
    """
    if registry is None:
        registry = get_provider_registry()
        register_all(registry)
    return registry.create(name, access_token, **kwargs)


def available_providers(registry: ProviderRegistry | None = None) -> list[str]:
    if registry is None:
        registry = get_provider_registry()
        register_all(registry)
    return registry.list_providers()
