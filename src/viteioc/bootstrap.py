import logging
from types import ModuleType
from typing import Iterable, Optional, Union

from dependency_injector import providers
from pydantic_settings import YamlConfigSettingsSource, DotEnvSettingsSource

from .components.protocols import Component
from .config.models import ViteAppConfig, ViteConfig
from .config.registry import register_configuration
from .container import ViteContainer, ContainerInterface
from .di.wiring import wire, inject_dependencies

logger = logging.getLogger(__name__)


def initialize_vite_app(
        components: Iterable[Component] = (),
        modules: Iterable[Union[str, ModuleType]] = ()
) -> ContainerInterface:
    """
    Initialize the application container from the environment.

    Loads environment configuration, the context-specific ``.{context}.env``
    file and the YAML configuration file, then builds the container.

    :param components: Extra components whose configuration models should be loaded.
    :param modules: Modules to wire.
    :return: The initialized container interface.
    """
    logger.info("Initializing Vite application")
    ViteAppConfig.clear_sources()
    app_config = ViteAppConfig()  # Initial load to get context and config path from .env

    if app_config.context:
        logger.debug("Loading context-specific configuration for context: %s", app_config.context)

        context = app_config.context
        ViteAppConfig.add_sources(lambda x: DotEnvSettingsSource(
            x,
            env_file=f".{context}.env"
        ))

        app_config = ViteAppConfig(
            context=app_config.context
        )  # Reload to apply context-specific settings
    else:
        logger.debug("No context provided; using default environment configuration")

    if app_config.config_path:
        logger.debug("Loading configuration from: %s", app_config.config_path)

        config_path = app_config.config_path
        ViteAppConfig.add_sources(lambda x: YamlConfigSettingsSource(
            x,
            yaml_file=config_path
        ))

    return compile_vite_app(app_config, components=components, modules=modules)


def compile_vite_app(
        app_config: Optional[ViteAppConfig] = None,
        components: Iterable[Component] = (),
        modules: Iterable[Union[str, ModuleType]] = ()
) -> ContainerInterface:
    """
    Build the container for an already loaded application configuration.

    :param app_config: The application configuration. Defaults to a fresh ViteAppConfig.
    :param components: Extra components whose configuration models should be loaded.
    :param modules: Modules to wire.
    """
    logger.info("Compiling Vite application")

    container = ViteContainer()
    container.logger.override(providers.Singleton(logging.getLogger, "viteioc"))
    api_container = ContainerInterface(container)

    return reconfigure_vite_app(
        api_container,
        app_config or ViteAppConfig(),
        components=components,
        modules=modules
    )


def reconfigure_vite_app(
        api_container: ContainerInterface,
        app_config: ViteAppConfig,
        components: Iterable[Component] = (),
        modules: Iterable[Union[str, ModuleType]] = ()
) -> ContainerInterface:
    """
    Reload the settings and rewire the container.

    The loaded manifest and the Vite component are rebuilt on next use.

    :param api_container: The container interface.
    :param app_config: The application configuration whose class and sources are used.
    :param components: Extra components whose configuration models should be loaded.
    :param modules: Modules to wire.
    """
    logger.info("Configuring Vite application")

    register_configuration(ViteConfig)
    inject_dependencies(*components)

    config = type(app_config).load_config()
    logger.debug("Loaded application configuration: %s", config)

    api_container.set_config(config)

    return wire(api_container, modules=modules)
