import inspect
from logging import Logger
from typing import TypeVar, Optional, overload

import pydantic
from dependency_injector.wiring import Provide, provided

from ..container import ViteContainer, ContainerInterface
from ..manifest.models import ManifestIndex
from ..vite import Vite, ViteScope

_Model_type = TypeVar("_Model_type", bound=pydantic.BaseModel)


@overload
def get_config(model: type[_Model_type]) -> _Model_type:  # pragma: no cover
    ...


@overload
def get_config(model: None = None) -> Optional[pydantic.BaseModel]:  # pragma: no cover
    ...


def get_config(model: Optional[type[_Model_type]] = None) -> Optional[_Model_type]:
    if model is None:
        return Provide["config", provided()]
    return Provide["config", provided().get_config.call(model)]


def get_container_api() -> ContainerInterface:
    return Provide["api", provided()]


def get_raw_container() -> ViteContainer:
    return Provide["__self__", provided()]


def get_vite() -> Vite:
    return Provide["vite"]


def get_manifest() -> ManifestIndex:
    return Provide["manifest"]


def get_scope() -> ViteScope:
    return Provide["scope"]


def get_logger(*name: str) -> Logger:
    if not name:
        calling_frame = inspect.stack()[1]
        mod = inspect.getmodule(calling_frame[0])
        name = mod.__name__ if mod else "logger"
    else:
        name = ".".join(name)

    return Provide["logger", provided().getChild.call(name)]
