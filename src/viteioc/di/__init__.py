from .providers import (
    get_config,
    get_container_api,
    get_raw_container,
    get_logger,
    get_vite,
    get_manifest,
    get_scope,
)
from .wiring import wire, inject_dependencies

__all__ = [
    "get_config",
    "get_container_api",
    "get_raw_container",
    "get_logger",
    "get_vite",
    "get_manifest",
    "get_scope",
    "wire",
    "inject_dependencies",
]
