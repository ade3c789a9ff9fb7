"""Route descriptors — the declarative, pre-compilation form of a route.

A descriptor is what a route file says about one route::

    routes:
      - user:
          path: /user/{id}
          controller: user_controller/crud
          middleware: user_middleware::test
          methods: get, post, delete, put
          requirements:
            id: "^[0-9]+"

``RouteDescriptor.from_mapping()`` validates one such record. Compiling
it into a matchable ``Route`` is the compiler's job.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from routebook.errors import DescriptorError


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """One route as declared in configuration."""

    name: str
    path: str
    controller: str
    methods: tuple[str, ...] = ()
    middleware: str = ""
    language: str = ""
    requirements: Mapping[str, str] = field(default_factory=dict)
    source: str | None = None

    @classmethod
    def from_mapping(
        cls,
        name: str,
        data: Any,
        *,
        source: str | None = None,
    ) -> "RouteDescriptor":
        """Build a descriptor from a raw mapping read from a route file.

        Raises ``DescriptorError`` when a required key is missing or a key
        has the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise DescriptorError(name, "route definition must be a mapping", source)

        path = data.get("path")
        if not isinstance(path, str):
            raise DescriptorError(name, "missing or non-string 'path'", source)

        controller = data.get("controller")
        if not isinstance(controller, str):
            raise DescriptorError(name, "missing or non-string 'controller'", source)

        return cls(
            name=name,
            path=path,
            controller=controller.replace("/", "::"),
            methods=_parse_methods(name, data.get("methods"), source),
            middleware=_optional_str(name, data, "middleware", source),
            language=_optional_str(name, data, "language", source),
            requirements=_parse_requirements(name, data.get("requirements"), source),
            source=source,
        )


def _parse_methods(name: str, raw: Any, source: str | None) -> tuple[str, ...]:
    """Normalize ``"get, post,"`` or ``["GET", "post"]`` to lowercase tokens."""
    if raw is None:
        return ()
    if isinstance(raw, str):
        items = raw.strip(",").split(",")
    elif isinstance(raw, list | tuple):
        if not all(isinstance(item, str) for item in raw):
            raise DescriptorError(name, "'methods' entries must be strings", source)
        items = list(raw)
    else:
        raise DescriptorError(name, "'methods' must be a string or a list", source)
    return tuple(item.strip().lower() for item in items if item.strip())


def _optional_str(name: str, data: Mapping[str, Any], key: str, source: str | None) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DescriptorError(name, f"'{key}' must be a string", source)
    return value


def _parse_requirements(name: str, raw: Any, source: str | None) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise DescriptorError(name, "'requirements' must be a mapping", source)
    requirements: dict[str, str] = {}
    for key, pattern in raw.items():
        if not isinstance(key, str) or not isinstance(pattern, str):
            raise DescriptorError(name, f"requirement {key!r} must map a name to a string", source)
        requirements[key] = pattern
    return requirements
