"""Routebook exception hierarchy.

Shared across the compiler, router, loader, and CLI so every module
raises and catches the same types.
"""


class RoutebookError(Exception):
    """Base for all routebook-specific errors."""


class ConfigurationError(RoutebookError):
    """Raised when route configuration is invalid.

    Typically raised while compiling templates at startup.
    """


class DescriptorError(ConfigurationError):
    """A single route descriptor could not be compiled.

    Carries the offending route name and, when the descriptor came from
    a route file, the file it was read from.
    """

    def __init__(self, route_name: str, reason: str, source: str | None = None) -> None:
        self.route_name = route_name
        self.reason = reason
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Route {route_name!r}{where}: {reason}")


class RouteNotFound(RoutebookError):  # noqa: N818 — mirrors the lookup vocabulary
    """No route matched a lookup, or no route carries a requested name.

    Raised by ``Router.lookup()`` with ``path`` and ``method`` set, and by
    ``Router.build()`` / ``Router.get()`` with ``name`` set.
    """

    def __init__(
        self,
        *,
        path: str | None = None,
        method: str | None = None,
        name: str | None = None,
    ) -> None:
        self.path = path
        self.method = method
        self.name = name
        if name is not None:
            message = f'Route "{name}" not found.'
        else:
            message = f"No route found for uri '{path}' and method '{method}'"
        super().__init__(message)
