"""
viteioc - Vite asset integration built on dependency injection.

This module provides a clean public surface for the package.
Consumers should import from here for stable API access.
"""

from .api import (
    # Manifest
    ManifestError,
    ManifestUnavailable,
    EntryNotFound,
    load_manifest,
    AssetTag,
    ManifestEntry,
    ManifestIndex,
    TagType,
    ManifestResolver,
    resolve_tags,
    # Views
    AssetView,
    HtmlAssetView,
    register_tags,
    # Vite
    Vite,
    ViteScope,
    DevServerProbe,
    # Container
    ContainerInterface,
    ViteContainer,
    # Components
    Component,
    ComponentMetadata,
    metadata,
    component_internals,
    component_str,
    initialize_components,
    shutdown_components,
    # DI
    get_config,
    get_container_api,
    get_raw_container,
    get_logger,
    get_vite,
    get_manifest,
    get_scope,
    wire,
    inject,
    # Config
    Settings,
    ViteConfig,
    ViteAppConfig,
    register_configuration,
    clear_configurations,
    # Bootstrap
    initialize_vite_app,
    compile_vite_app,
    reconfigure_vite_app,
    # Logging
    setup_logging,
)

__all__ = [
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
    "AssetView",
    "HtmlAssetView",
    "register_tags",
    "Vite",
    "ViteScope",
    "DevServerProbe",
    "ContainerInterface",
    "ViteContainer",
    "Component",
    "ComponentMetadata",
    "metadata",
    "component_internals",
    "component_str",
    "initialize_components",
    "shutdown_components",
    "get_config",
    "get_container_api",
    "get_raw_container",
    "get_logger",
    "get_vite",
    "get_manifest",
    "get_scope",
    "wire",
    "inject",
    "Settings",
    "ViteConfig",
    "ViteAppConfig",
    "register_configuration",
    "clear_configurations",
    "initialize_vite_app",
    "compile_vite_app",
    "reconfigure_vite_app",
    "setup_logging",
]
