from dataclasses import dataclass
from typing import Iterable, Optional, TypedDict, Union

import pydantic


@dataclass
class Internals:
    is_initialized: bool = False
    is_initializing: bool = False
    is_shutting_down: bool = False


class ComponentMetadata(TypedDict):
    """
    Metadata for a component.

    Attributes:
        name (str): The name of the component.
        version (str): The version of the component.
        description (str): A brief description of the component.
        config (set[type[BaseModel]]): Pydantic models the component reads its settings from.
    """
    name: str
    version: str
    description: str
    config: set[type[pydantic.BaseModel]]

    _internals: Optional[Internals]


def metadata(
        *,
        name: str,
        version: str,
        description: str,
        config: Optional[Union[Iterable[type[pydantic.BaseModel]], type[pydantic.BaseModel]]] = None,
        **kwargs
) -> ComponentMetadata:
    """
    Create metadata for a component.

    Args:
        name (str): The name of the component.
        version (str): The version of the component.
        description (str): A brief description of the component.
        config: An optional Pydantic model or iterable of models for configuration.
        **kwargs: Additional keyword arguments to include in the metadata.
    """
    if config is not None:
        if isinstance(config, type) and issubclass(config, pydantic.BaseModel):
            config = {config}
        else:
            config = set(config)

    return {
        "name": name,
        "version": version,
        "description": description,
        "config": config or set(),
        "_internals": Internals(),
        **kwargs
    }
