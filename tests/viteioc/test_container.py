import logging

import pytest
from dependency_injector import providers

from viteioc.config.base import Settings
from viteioc.config.models import ViteAppConfig, ViteConfig
from viteioc.config.registry import register_configuration
from viteioc.container import ViteContainer, ContainerInterface
from viteioc.manifest.models import ManifestIndex
from viteioc.manifest.resolver import ManifestResolver
from viteioc.view import HtmlAssetView
from viteioc.vite import Vite, ViteScope


@pytest.fixture
def settings(manifest_file, monkeypatch):
    monkeypatch.setenv("VITE_MANIFEST_PATH", str(manifest_file))
    register_configuration(ViteConfig)
    return ViteAppConfig.load_config()


@pytest.fixture
def interface(settings):
    interface = ContainerInterface(ViteContainer())
    interface.set_config(settings)
    return interface


class TestViteContainer:
    """Tests for ViteContainer class."""

    def test_container_has_self_provider(self):
        container = ViteContainer()
        assert container.__self__() is container

    def test_defaults(self):
        container = ViteContainer()
        assert container.api() is None
        assert container.config() is None
        assert container.logger() is None

    def test_vite_config_without_settings(self):
        container = ViteContainer()
        assert container.vite_config() == ViteConfig()

    def test_override_config(self):
        container = ViteContainer()
        settings = Settings()
        container.config.override(providers.Object(settings))
        assert container.config() is settings


class TestContainerInterface:
    """Tests for ContainerInterface class."""

    def test_registers_itself_as_api(self):
        container = ViteContainer()
        interface = ContainerInterface(container)
        assert container.api() is interface
        assert interface.raw_container() is container

    def test_provided_config(self, interface, settings):
        assert interface.provided_config() is settings

    def test_provided_vite_config(self, interface, manifest_file):
        assert interface.provided_vite_config().manifest_path == manifest_file

    def test_manifest_is_singleton(self, interface):
        manifest = interface.provided_manifest()
        assert isinstance(manifest, ManifestIndex)
        assert interface.provided_manifest() is manifest

    def test_resolver_uses_manifest(self, interface):
        resolver = interface.provided_resolver()
        assert isinstance(resolver, ManifestResolver)
        assert resolver.index is interface.provided_manifest()

    def test_vite_is_singleton(self, interface):
        vite = interface.provided_vite()
        assert isinstance(vite, Vite)
        assert interface.provided_vite() is vite

    def test_vite_shares_container_manifest(self, interface):
        vite = interface.provided_vite()
        assert vite.resolver.index is interface.provided_manifest()

    def test_vite_uses_container_resolver(self, interface):
        assert interface.provided_vite().resolver is interface.provided_resolver()

    def test_new_scope_per_call(self, interface):
        first = interface.new_scope()
        second = interface.new_scope()
        assert isinstance(first, ViteScope)
        assert first is not second
        assert first.vite is second.vite

    def test_new_scope_with_view(self, interface):
        view = HtmlAssetView()
        assert interface.new_scope(view).view is view

    def test_set_logger(self, interface):
        new_logger = logging.getLogger("viteioc.test")
        interface.set_logger(new_logger)
        assert interface.provided_logger() is new_logger
        assert interface.provided_vite().logger is new_logger

    def test_set_config_resets_singletons(self, interface, manifest_file, monkeypatch):
        vite = interface.provided_vite()

        monkeypatch.setenv("VITE_BASE_URL", "/assets/")
        interface.set_config(ViteAppConfig.load_config())

        assert interface.provided_vite() is not vite
        assert interface.provided_vite().config.base_url == "/assets/"
