import logging
from logging import Logger
from typing import Optional

from dependency_injector import containers, providers

from .config.base import Settings
from .config.models import ViteConfig
from .manifest.loader import load_manifest
from .manifest.models import ManifestIndex
from .manifest.resolver import ManifestResolver
from .view import AssetView
from .vite import Vite, ViteScope

logger = logging.getLogger(__name__)


def _vite_config(settings: Optional[Settings]) -> ViteConfig:
    if settings is None:
        return ViteConfig()
    return settings.get_config(ViteConfig)


class ViteContainer(containers.DeclarativeContainer):
    __self__ = providers.Self()
    api = providers.Object(None)

    config = providers.Object(None)
    logger = providers.Object(None)

    vite_config = providers.Callable(_vite_config, config)

    manifest = providers.Singleton(
        lambda cfg: load_manifest(cfg.manifest_path),
        vite_config
    )
    resolver = providers.Singleton(ManifestResolver, manifest)

    vite = providers.Singleton(
        Vite,
        config=vite_config,
        manifest=manifest.provider,
        logger=logger,
        resolver=resolver.provider
    )
    scope = providers.Factory(ViteScope, vite=vite)


class ContainerInterface:
    """Interface for interacting with the ViteContainer."""

    def __init__(self, container: ViteContainer) -> None:
        self._container = container

        container.api.override(
            providers.Object(self)
        )

    def raw_container(self) -> ViteContainer:
        return self._container

    def provided_config(self) -> Optional[Settings]:
        return self._container.config()

    def provided_vite_config(self) -> ViteConfig:
        return self._container.vite_config()

    def provided_logger(self) -> Logger:
        return self._container.logger()

    def provided_manifest(self) -> ManifestIndex:
        return self._container.manifest()

    def provided_resolver(self) -> ManifestResolver:
        return self._container.resolver()

    def provided_vite(self) -> Vite:
        return self._container.vite()

    def new_scope(self, view: Optional[AssetView] = None) -> ViteScope:
        if view is None:
            return self._container.scope()
        return self._container.scope(view=view)

    def set_logger(self, new_logger: Logger) -> None:
        logger.debug("Setting container logger: %s", new_logger.name if new_logger else None)
        self._container.logger.override(
            providers.Object(new_logger)
        )

    def set_config(self, config: Settings) -> None:
        logger.debug("Setting container configuration: %s", type(config).__name__)
        self._container.config.override(
            providers.Object(config)
        )
        self.reset()

    def reset(self) -> None:
        """Drop the loaded manifest and component so they are rebuilt from the current config."""
        logger.debug("Resetting container singletons")
        self._container.reset_singletons()
