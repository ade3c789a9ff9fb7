"""Routebook — declarative route tables loaded from YAML.

Matches a request path and method against compiled route templates,
extracts validated path parameters, and builds paths back from route
names.

Basic usage::

    from routebook import load_router

    router = load_router("config/routes")
    match = router.lookup("/user/42", "get")
    match.controller       # "user_controller::crud"
    match.path_params      # {"id": "42"}

    router.build("user", {"id": "101"})  # "/user/101"
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "DescriptorError",
    "RouteDescriptor",
    "RouteMatch",
    "RouteNotFound",
    "Route",
    "Router",
    "RouterConfig",
    "RoutebookError",
    "load_router",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routebook`` fast while providing a clean top-level API.
    """
    if name in ("Router", "Route", "RouteMatch"):
        from routebook import routing as _routing

        return getattr(_routing, name)

    if name == "RouteDescriptor":
        from routebook.descriptor import RouteDescriptor

        return RouteDescriptor

    if name == "RouterConfig":
        from routebook.config import RouterConfig

        return RouterConfig

    if name == "load_router":
        from routebook.loader import load_router

        return load_router

    if name in ("RoutebookError", "ConfigurationError", "DescriptorError", "RouteNotFound"):
        from routebook import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
