from dependency_injector.wiring import Provide

from viteioc.config.models import ViteConfig
from viteioc.di import providers as providers_module
from viteioc.di.providers import (
    get_config,
    get_container_api,
    get_raw_container,
    get_logger,
    get_vite,
    get_manifest,
    get_scope,
)


class TestMarkers:
    """Tests for the Provide marker factories."""

    def test_all_markers_are_provide(self):
        markers = [
            get_config(),
            get_config(ViteConfig),
            get_container_api(),
            get_raw_container(),
            get_logger(),
            get_logger("assets"),
            get_vite(),
            get_manifest(),
            get_scope(),
        ]
        assert all(isinstance(marker, Provide) for marker in markers)

    def test_module_exports(self):
        for name in ("get_config", "get_vite", "get_manifest", "get_scope", "get_logger"):
            assert callable(getattr(providers_module, name))
