"""
Public API of viteioc.

This module exports all public interfaces for consumers to use.
Import only from this module for stable API access.
"""

from dependency_injector.wiring import inject

from .bootstrap import (
    initialize_vite_app,
    compile_vite_app,
    reconfigure_vite_app,
)
from .components.lifecycle import (
    initialize_components,
    shutdown_components,
)
from .components.metadata import ComponentMetadata, metadata
from .components.protocols import Component
from .components.registry import component_internals, component_str
from .config.base import Settings
from .config.models import ViteConfig, ViteAppConfig
from .config.registry import register_configuration, clear_configurations
from .config.setup import setup_logging
from .container import ContainerInterface, ViteContainer
from .dev_server import DevServerProbe
from .di.providers import (
    get_config,
    get_container_api,
    get_raw_container,
    get_logger,
    get_vite,
    get_manifest,
    get_scope,
)
from .di.wiring import wire
from .manifest.errors import ManifestError, ManifestUnavailable, EntryNotFound
from .manifest.loader import load_manifest
from .manifest.models import AssetTag, ManifestEntry, ManifestIndex, TagType
from .manifest.resolver import ManifestResolver, resolve_tags
from .view import AssetView, HtmlAssetView, register_tags
from .vite import Vite, ViteScope

__all__ = [
    # Manifest
    "ManifestError",
    "ManifestUnavailable",
    "EntryNotFound",
    "load_manifest",
    "AssetTag",
    "ManifestEntry",
    "ManifestIndex",
    "TagType",
    "ManifestResolver",
    "resolve_tags",
    # Views
    "AssetView",
    "HtmlAssetView",
    "register_tags",
    # Vite
    "Vite",
    "ViteScope",
    "DevServerProbe",
    # Container
    "ContainerInterface",
    "ViteContainer",
    # Components
    "Component",
    "ComponentMetadata",
    "metadata",
    "component_internals",
    "component_str",
    "initialize_components",
    "shutdown_components",
    # DI
    "get_config",
    "get_container_api",
    "get_raw_container",
    "get_logger",
    "get_vite",
    "get_manifest",
    "get_scope",
    "wire",
    "inject",
    # Config
    "Settings",
    "ViteConfig",
    "ViteAppConfig",
    "register_configuration",
    "clear_configurations",
    # Bootstrap
    "initialize_vite_app",
    "compile_vite_app",
    "reconfigure_vite_app",
    # Logging
    "setup_logging",
]
