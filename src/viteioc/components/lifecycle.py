import asyncio
import logging

from .protocols import Component
from .registry import component_initialized, component_internals, component_str

logger = logging.getLogger(__name__)


async def initialize_components(
        *components: Component,
        return_exceptions: bool = False
):
    """
    Initialize the specified components.

    :param components: Components to initialize.
    :param return_exceptions: Whether to return exceptions instead of raising them.
    """
    async def __initialize(comp: Component):
        if component_initialized(comp):
            logger.debug("Component already initialized: %s", component_str(comp))
            return
        _internal = component_internals(comp)
        if _internal.is_initializing:
            logger.debug("Component is already initializing: %s", component_str(comp))
            return
        if getattr(comp, "initialize", None) is not None:
            logger.debug("Initializing component: %s", component_str(comp))
            _internal.is_initializing = True
            try:
                if await comp.initialize() is False:
                    logger.debug("Component initialization aborted: %s", component_str(comp))
                    return
            finally:
                _internal.is_initializing = False
        else:
            logger.debug("Component has no initialize method: %s", component_str(comp))
        _internal.is_initialized = True
        logger.debug("Component initialized: %s", component_str(comp))

    _ret = await asyncio.gather(
        *map(__initialize, components),
        return_exceptions=True
    )

    _exceptions = [_exc for _exc in _ret if isinstance(_exc, Exception)]

    if return_exceptions:
        return _exceptions

    if _exceptions:
        raise ExceptionGroup(
            "One or more errors occurred during component initialization.",
            _exceptions
        )

    return components


async def shutdown_components(
        *components: Component,
        return_exceptions: bool = False
):
    """
    Shutdown the specified components.

    :param components: Components to shut down.
    :param return_exceptions: Whether to return exceptions instead of raising them.
    """
    async def __shutdown(comp: Component):
        if not component_initialized(comp):
            logger.debug("Component not initialized: %s", component_str(comp))
            return
        _internal = component_internals(comp)
        if _internal.is_shutting_down:
            logger.debug("Component is already shutting down: %s", component_str(comp))
            return
        if getattr(comp, "shutdown", None) is not None:
            logger.debug("Shutting down component: %s", component_str(comp))
            _internal.is_shutting_down = True
            try:
                await comp.shutdown()
            finally:
                _internal.is_shutting_down = False
        else:
            logger.debug("Component has no shutdown method: %s", component_str(comp))
        _internal.is_initialized = False
        logger.debug("Component shut down: %s", component_str(comp))

    _ret = await asyncio.gather(
        *map(__shutdown, components),
        return_exceptions=True
    )

    _exceptions = [_exc for _exc in _ret if isinstance(_exc, Exception)]

    if return_exceptions:
        return _exceptions

    if _exceptions:
        raise ExceptionGroup(
            "One or more errors occurred during component shutdown.",
            _exceptions
        )

    return components
