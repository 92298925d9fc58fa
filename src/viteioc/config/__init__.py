from .base import Settings
from .registry import (
    _CONFIGURATIONS,
    register_configuration,
    clear_configurations,
)
from .models import ViteConfig, ViteAppConfig
from .setup import setup_logging

__all__ = [
    "Settings",
    "_CONFIGURATIONS",
    "register_configuration",
    "clear_configurations",
    "setup_logging",
    "ViteConfig",
    "ViteAppConfig",
]
