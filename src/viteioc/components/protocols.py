from typing import Protocol, runtime_checkable, Coroutine, Any, Optional, Callable

from .metadata import ComponentMetadata


@runtime_checkable
class Component(Protocol):
    """
    Protocol defining the interface for components.

    Required:
        __metadata__: ComponentMetadata dictionary

    Optional lifecycle methods:
        initialize: Async method called during component initialization
        shutdown: Async method called during component shutdown
    """
    __metadata__: ComponentMetadata

    initialize: Optional[Callable[..., Coroutine[Any, Any, None]]]
    shutdown: Optional[Callable[..., Coroutine[Any, Any, None]]]
