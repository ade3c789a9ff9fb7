"""Template compilation — raw path templates into segment sequences.

Runs once per route when the table is built::

    "/user/{id}/edit" -> (Literal("/user/"), Parameter("id", ...), Literal("/edit"))
"""

import logging
import re
from collections.abc import Mapping

from routebook.descriptor import RouteDescriptor
from routebook.errors import ConfigurationError, DescriptorError
from routebook.routing.params import DEFAULT_REQUIREMENT, compile_requirement
from routebook.routing.route import Literal, Parameter, Route, Segment

logger = logging.getLogger("routebook.router")

_TOKEN = re.compile(r"\{(.+?)\}")


def compile_template(
    template: str,
    requirements: Mapping[str, str] | None = None,
    default_requirement: str = DEFAULT_REQUIREMENT,
) -> tuple[Segment, ...]:
    """Compile *template* into an ordered tuple of segments.

    Text between ``{name}`` tokens becomes ``Literal`` segments; each token
    becomes a ``Parameter`` guarded by its entry in *requirements*, or by
    *default_requirement* when there is none.

    Raises ``ConfigurationError`` for an empty template, a parameter name
    used twice, or an invalid requirement pattern.
    """
    if not template:
        msg = "Route template must not be empty."
        raise ConfigurationError(msg)

    requirements = requirements or {}
    segments: list[Segment] = []
    seen: set[str] = set()
    start = 0

    for token in _TOKEN.finditer(template):
        if start < token.start():
            segments.append(Literal(template[start : token.start()]))
        name = token.group(1)
        if name in seen:
            msg = f"Parameter {{{name}}} appears more than once in {template!r}."
            raise ConfigurationError(msg)
        seen.add(name)
        if segments and isinstance(segments[-1], Parameter):
            # Boundary between the two is left to the first pattern
            logger.debug(
                "Template %r has adjacent parameters {%s}{%s}.",
                template,
                segments[-1].name,
                name,
            )
        requirement = requirements.get(name, default_requirement)
        segments.append(Parameter(name, requirement, compile_requirement(name, requirement)))
        start = token.end()

    if start < len(template):
        segments.append(Literal(template[start:]))

    for name, requirement in requirements.items():
        if name not in seen:
            compile_requirement(name, requirement)
            logger.warning("Requirement %r does not match any parameter in %r.", name, template)

    return tuple(segments)


def compile_route(
    descriptor: RouteDescriptor,
    default_requirement: str = DEFAULT_REQUIREMENT,
) -> Route:
    """Compile a descriptor into an immutable ``Route``.

    Template errors are re-raised as ``DescriptorError`` naming the route.
    """
    try:
        segments = compile_template(
            descriptor.path,
            descriptor.requirements,
            default_requirement,
        )
    except ConfigurationError as exc:
        raise DescriptorError(descriptor.name, str(exc), descriptor.source) from exc

    return Route(
        name=descriptor.name,
        path=descriptor.path,
        segments=segments,
        controller=descriptor.controller,
        methods=frozenset(descriptor.methods),
        middleware=descriptor.middleware,
        language_key=descriptor.language or None,
    )
