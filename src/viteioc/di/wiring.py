import importlib
import logging
import sys
from types import ModuleType
from typing import Iterable, Union

from ..config.registry import register_configuration, clear_configurations
from ..components.protocols import Component
from ..container import ContainerInterface

logger = logging.getLogger(__name__)


def inject_dependencies(*components: Component) -> None:
    """
    Register the configuration models declared by components.

    :param components: Components whose ``config`` metadata should be registered.
    """
    logger.debug("Injecting dependencies")
    new_configs = {}

    for item in components:
        for config in item.__metadata__.get("config", set()):
            prefix = getattr(config, "__prefix__", None) or item.__metadata__["name"]
            logger.debug("Registering configuration for component '%s' with prefix '%s'",
                         item.__metadata__.get("name", "unknown"), prefix)
            new_configs[prefix] = config

    clear_configurations(prefixes=new_configs.keys())

    for prefix, config in new_configs.items():
        register_configuration(config, prefix=prefix)

    logger.debug("Dependency injection complete")


def wire(
        api_container: ContainerInterface,
        modules: Iterable[Union[str, ModuleType]] = ()
) -> ContainerInterface:
    """
    Wire the container into the given modules so ``Provide`` markers resolve.

    :param api_container: The application container to wire.
    :param modules: Module objects or importable module names.
    :return: The container interface.
    """
    logger.debug("Wiring container")

    module_objects = set()
    for module in modules:
        if isinstance(module, ModuleType):
            module_objects.add(module)
            continue
        # Try to get from sys.modules first (already imported)
        module_obj = sys.modules.get(module)
        if module_obj is None:
            try:
                module_obj = importlib.import_module(module)
            except ImportError as e:
                logger.warning("Could not import module '%s' for wiring: %s", module, e)
                continue
        module_objects.add(module_obj)

    logger.debug("Wiring %d modules: %s", len(module_objects), [m.__name__ for m in module_objects])
    api_container.raw_container().wire(modules=module_objects)
    logger.debug("Container wiring complete")
    return api_container
