"""Provider registry for name-based construction.

Architecture:
    The registry maps a provider name ("box", "google_drive", ...) to its
    connector class and the capabilities the class declares. It does not
    pool instances: every ``create`` returns a fresh provider that owns its
    own transport, so two callers never share upload or listing state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.base import BaseDriveProvider
from ..core.enums import Capability
from ..core.exceptions import DriveError


@dataclass(frozen=True)
class ProviderRegistration:
    """Registration metadata for a provider."""

    name: str
    provider_class: type[BaseDriveProvider]

    @property
    def capabilities(self) -> frozenset[Capability]:
        return self.provider_class.capabilities


class ProviderRegistry:
    """Central registry of provider classes."""

    def __init__(self) -> None:
        self._registrations: dict[str, ProviderRegistration] = {}

    def register(self, name: str, provider_class: type[BaseDriveProvider]) -> None:
        """Register a provider class under ``name``.

        Raises:
            DriveError: If ``name`` is already registered
        """
        if name in self._registrations:
            raise DriveError(f"Provider '{name}' is already registered")
        self._registrations[name] = ProviderRegistration(name, provider_class)

    def unregister(self, name: str) -> None:
        """Remove a registration.

        Raises:
            DriveError: If ``name`` is not registered
        """
        if name not in self._registrations:
            raise DriveError(f"Provider '{name}' is not registered")
        del self._registrations[name]

    def get_registration(self, name: str) -> ProviderRegistration:
        registration = self._registrations.get(name)
        if registration is None:
            raise DriveError(f"Provider '{name}' is not registered")
        return registration

    def create(self, name: str, *args: Any, **kwargs: Any) -> BaseDriveProvider:
        """Instantiate the provider registered under ``name``."""
        return self.get_registration(name).provider_class(*args, **kwargs)

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def list_providers(self) -> list[str]:
        return sorted(self._registrations)


# Global singleton instance
_default_registry: ProviderRegistry | None = None


def get_provider_registry() -> ProviderRegistry:
    """Get the global provider registry singleton (created on first access)."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ProviderRegistry()
    return _default_registry
