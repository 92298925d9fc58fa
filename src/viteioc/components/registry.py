from .metadata import Internals
from .protocols import Component


def component_internals(component: Component) -> Internals:
    """
    Get the internal state of a component, creating it if missing.

    :param component: The component to analyze.
    :return: The internal state of the component.
    """
    assert hasattr(component, "__metadata__")
    if component.__metadata__.get("_internals") is None:
        component.__metadata__["_internals"] = Internals()
    return component.__metadata__["_internals"]


def component_str(component: Component) -> str:
    """
    Get a string representation of a component.

    :param component: The component.
    :return: String in format "name vversion".
    """
    assert hasattr(component, "__metadata__")
    meta = component.__metadata__
    return f"{meta['name']} v{meta['version']}"


def component_initialized(component: Component) -> bool:
    assert hasattr(component, "__metadata__")
    internals = component.__metadata__.get("_internals")
    return internals is not None and internals.is_initialized
