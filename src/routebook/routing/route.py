"""Route, RouteMatch, and segment frozen dataclasses."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Literal:
    """Fixed template text, matched verbatim.

    ``/user/{id}/edit`` has the literals ``/user/`` and ``/edit``.
    """

    text: str

    @property
    def surface(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Parameter:
    """A named template slot guarded by a compiled pattern.

    ``requirement`` keeps the pattern source; ``pattern`` is compiled once
    when the template is compiled and reused for every request.
    """

    name: str
    requirement: str
    pattern: re.Pattern[str] = field(compare=False, repr=False)

    @property
    def surface(self) -> str:
        return "{" + self.name + "}"


Segment = Literal | Parameter


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route definition.

    Built once when the route table is loaded and never mutated afterward.
    An empty ``methods`` set accepts any method.
    """

    name: str
    path: str
    segments: tuple[Segment, ...]
    controller: str
    methods: frozenset[str] = frozenset()
    middleware: str = ""
    language_key: str | None = None

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Parameter names in template order."""
        return tuple(seg.name for seg in self.segments if isinstance(seg, Parameter))

    def allows(self, method: str) -> bool:
        """True if *method* passes this route's method filter."""
        return not self.methods or method.lower() in self.methods


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    Created per lookup. ``language`` holds the value captured for the
    route's ``language_key``, or ``None`` when the route has no language
    key or did not capture it.
    """

    route: Route
    path_params: dict[str, str]
    language: str | None = None

    @property
    def name(self) -> str:
        return self.route.name

    @property
    def controller(self) -> str:
        return self.route.controller

    @property
    def middleware(self) -> str:
        return self.route.middleware
