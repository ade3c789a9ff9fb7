"""Compiled route table with declaration-order matching.

Routes are added during setup and frozen into an immutable table by
``compile()``. Lookups scan the table in declaration order; the first
route whose method filter and template both accept the request wins.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping

from routebook.descriptor import RouteDescriptor
from routebook.errors import DescriptorError, RouteNotFound
from routebook.routing.compiler import compile_route
from routebook.routing.matcher import attempt
from routebook.routing.params import DEFAULT_REQUIREMENT
from routebook.routing.route import Route, RouteMatch

logger = logging.getLogger("routebook.router")


class Router:
    """Route table with lookup and reverse path building.

    Usage::

        router = Router.from_descriptors([
            RouteDescriptor(name="user", path="/user/{id}", controller="user::show"),
        ])
        match = router.lookup("/user/42", "get")
        router.build("user", {"id": "7"})  # "/user/7"
    """

    __slots__ = ("_compiled", "_rejected", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._rejected: list[DescriptorError] = []
        self._compiled = False

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[RouteDescriptor | DescriptorError],
        *,
        strict: bool = True,
        default_requirement: str = DEFAULT_REQUIREMENT,
    ) -> "Router":
        """Compile *descriptors* in order into a frozen router.

        A ``DescriptorError`` may be passed in place of a descriptor when
        the loader already failed to parse one. With *strict* the first
        malformed descriptor is raised; otherwise each one is logged and
        kept in ``rejected``.
        """
        router = cls()
        for item in descriptors:
            try:
                if isinstance(item, DescriptorError):
                    raise item
                router.add(compile_route(item, default_requirement))
            except DescriptorError as exc:
                if strict:
                    raise
                logger.warning("Skipping route: %s", exc)
                router._rejected.append(exc)
        router.compile()
        return router

    def add(self, route: Route) -> None:
        """Add a route to the table. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._routes.append(route)

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._compiled = True

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in declaration order."""
        return tuple(self._routes)

    @property
    def rejected(self) -> tuple[DescriptorError, ...]:
        """Descriptors skipped by a non-strict ``from_descriptors()``."""
        return tuple(self._rejected)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def lookup(self, path: str, method: str) -> RouteMatch:
        """Find the first route matching *path* and *method*.

        Returns a new ``RouteMatch`` on success.
        Raises ``RouteNotFound`` if no route accepts the request.
        """
        logger.debug('Finding a Route for "%s"...', path)
        for route in self._routes:
            logger.debug('Checking Route "%s"...', route.name)
            match = attempt(route, path, method)
            if match is not None:
                return match
        raise RouteNotFound(path=path, method=method)

    def get(self, name: str) -> Route:
        """Return the first route named *name*.

        Raises ``RouteNotFound`` if no route has that name.
        """
        for route in self._routes:
            if route.name == name:
                return route
        raise RouteNotFound(name=name)

    def build(self, route_name: str, parameters: Mapping[str, object] | None = None) -> str:
        """Build a path for *route_name* by substituting *parameters*.

        Every ``{key}`` token in the template is replaced by ``str(value)``.
        Tokens without a supplied value stay in the output as ``{key}``;
        keys the template does not use are ignored.

        Raises ``RouteNotFound`` if no route has that name.
        """
        try:
            route = self.get(route_name)
        except RouteNotFound:
            logger.warning('Route "%s" not found.', route_name)
            raise

        path = route.path
        for key, value in (parameters or {}).items():
            path = path.replace("{" + key + "}", str(value))
        return path
