"""Unit tests for provider registration and the name-based factory."""

from __future__ import annotations

import pytest

from drivelink.connectors.baidu_pan import BaiduPanRESTConnector
from drivelink.connectors.box import BoxRESTConnector
from drivelink.core import Capability, DriveError
from drivelink.registration import available_providers, create_provider, register_all
from drivelink.runtime.provider_registry import ProviderRegistry


class TestProviderRegistry:
    def test_register_and_create(self):
        registry = ProviderRegistry()
        registry.register("box", BoxRESTConnector)

        provider = registry.create("box", "token")

        assert isinstance(provider, BoxRESTConnector)
        assert provider.name == "box"

    def test_duplicate_registration_rejected(self):
        registry = ProviderRegistry()
        registry.register("box", BoxRESTConnector)
        with pytest.raises(DriveError):
            registry.register("box", BoxRESTConnector)

    def test_unknown_provider(self):
        with pytest.raises(DriveError):
            ProviderRegistry().create("dropbox", "token")

    def test_unregister(self):
        registry = ProviderRegistry()
        registry.register("box", BoxRESTConnector)
        registry.unregister("box")
        assert not registry.is_registered("box")
        with pytest.raises(DriveError):
            registry.unregister("box")

    def test_registration_exposes_capabilities(self):
        registry = ProviderRegistry()
        registry.register("baidu_pan", BaiduPanRESTConnector)
        capabilities = registry.get_registration("baidu_pan").capabilities
        assert Capability.UPLOAD not in capabilities
        assert Capability.LIST in capabilities


class TestRegistration:
    def test_register_all_is_idempotent(self):
        registry = ProviderRegistry()
        register_all(registry)
        register_all(registry)
        assert registry.list_providers() == ["baidu_pan", "box", "google_drive"]

    def test_create_provider_by_name(self):
        provider = create_provider("google_drive", "token")
        assert provider.name == "google_drive"
        assert "box" in available_providers()

    def test_create_provider_with_explicit_registry(self):
        registry = ProviderRegistry()
        register_all(registry)
        provider = create_provider("baidu_pan", "token", registry=registry, timeout=5.0)
        assert isinstance(provider, BaiduPanRESTConnector)
