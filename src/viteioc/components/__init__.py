from .lifecycle import (
    initialize_components,
    shutdown_components,
)
from .metadata import (
    Internals,
    ComponentMetadata,
    metadata
)
from .protocols import Component
from .registry import (
    component_internals,
    component_initialized,
    component_str,
)

__all__ = [
    "Internals",
    "ComponentMetadata",
    "metadata",
    "Component",
    "component_internals",
    "component_initialized",
    "component_str",
    "initialize_components",
    "shutdown_components",
]
