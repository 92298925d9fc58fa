import logging
from typing import Iterable, TypeVar, Optional

import pydantic

logger = logging.getLogger(__name__)

_M_type = TypeVar("_M_type", bound=type[pydantic.BaseModel])

_CONFIGURATIONS: dict[str, type[pydantic.BaseModel]] = {}


def _normalize_prefix(prefix: str) -> str:
    prefix = prefix.strip("_")
    prefix = prefix.lower()
    prefix = " ".join(prefix.split())
    return prefix.replace(" ", "_")


def register_configuration(
        _: Optional[_M_type] = None,
        prefix: Optional[str] = None
) -> _M_type:
    """
    Register a configuration model under a settings prefix.

    The prefix defaults to the model's ``__prefix__`` attribute, then to its
    lower-cased class name.
    """
    def __wrapper__(model: _M_type):
        nonlocal prefix

        assert issubclass(model, pydantic.BaseModel)

        if prefix is None:
            prefix = getattr(model, "__prefix__", None) or model.__name__

        prefix = _normalize_prefix(prefix)

        if prefix in _CONFIGURATIONS and _CONFIGURATIONS[prefix] is not model:
            logger.error("Configuration prefix collision: '%s' already registered for %s",
                         prefix, _CONFIGURATIONS[prefix])
            raise ValueError(
                f"Configuration prefix collision: '{prefix}' "
                f"already registered for {_CONFIGURATIONS[prefix]}"
            )

        _CONFIGURATIONS[prefix] = model
        logger.debug("Registered configuration '%s' with prefix '%s'", model.__name__, prefix)

        return model

    return __wrapper__ if _ is None else __wrapper__(_)


def clear_configurations(prefixes: Optional[Iterable[str]] = None):
    """Clear registered configurations, all of them unless ``prefixes`` is given."""
    if prefixes is None:
        logger.debug("Clearing all registered configurations")
        _CONFIGURATIONS.clear()
        return

    for prefix in prefixes:
        _CONFIGURATIONS.pop(_normalize_prefix(prefix), None)
