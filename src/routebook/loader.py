"""Route file discovery and parsing.

A route source is either a single YAML file or a folder walked
recursively for route files. Each file holds a ``routes`` sequence of
single-key mappings::

    routes:
      - home:
          path: /
          controller: home_controller::index
          methods: get

Unreadable files and invalid YAML are logged and skipped; a malformed
route entry becomes a ``DescriptorError`` handed on to the router.
"""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

import yaml

from routebook.config import RouterConfig
from routebook.descriptor import RouteDescriptor
from routebook.errors import ConfigurationError, DescriptorError
from routebook.routing.router import Router

logger = logging.getLogger("routebook.loader")


def iter_route_files(source: Path, suffixes: tuple[str, ...] = (".yaml",)) -> Iterator[Path]:
    """Yield route files under *source*.

    A file is yielded as-is. A folder is walked recursively in sorted
    order, yielding files whose suffix is in *suffixes* (case-insensitive).
    """
    if source.is_file():
        yield source
        return

    wanted = {suffix.lower() for suffix in suffixes}
    logger.debug("Reading folder %s...", source)
    try:
        entries = sorted(source.iterdir())
    except OSError as exc:
        logger.warning("%s", exc)
        return

    for entry in entries:
        if entry.is_dir():
            yield from iter_route_files(entry, suffixes)
        elif entry.suffix.lower() in wanted:
            yield entry
        else:
            logger.debug("%s is skipped.", entry)


def read_route_file(path: Path) -> list[RouteDescriptor | DescriptorError]:
    """Parse one route file into descriptors, in file order.

    Returns an empty list when the file cannot be read or parsed.
    """
    logger.debug("Reading file %s...", path)
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return []
    except yaml.YAMLError as exc:
        logger.warning("Invalid YAML in %s: %s", path, exc)
        return []

    source = str(path)
    entries = document.get("routes") if isinstance(document, Mapping) else None
    if not isinstance(entries, list):
        logger.warning("%s has no 'routes' sequence.", path)
        return []

    results: list[RouteDescriptor | DescriptorError] = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, Mapping) or len(entry) != 1:
            results.append(
                DescriptorError(
                    f"#{position}",
                    "route entry must be a single-key mapping of name to definition",
                    source,
                )
            )
            continue
        name, data = next(iter(entry.items()))
        try:
            results.append(RouteDescriptor.from_mapping(str(name), data, source=source))
        except DescriptorError as exc:
            results.append(exc)
    return results


def load_descriptors(
    source: str | Path,
    config: RouterConfig | None = None,
) -> list[RouteDescriptor | DescriptorError]:
    """Collect descriptors from every route file under *source*.

    A missing source is logged as an error and yields no routes, or raises
    ``ConfigurationError`` when ``config.strict`` is set.
    """
    config = config or RouterConfig()
    root = Path(source)
    if not root.exists():
        if config.strict:
            msg = f"Source path {root} not found."
            raise ConfigurationError(msg)
        logger.error("Source path %s not found.", root)
        return []

    descriptors: list[RouteDescriptor | DescriptorError] = []
    for path in iter_route_files(root, config.suffixes):
        descriptors.extend(read_route_file(path))
    return descriptors


def load_router(source: str | Path, config: RouterConfig | None = None) -> Router:
    """Load, compile, and freeze the route table found at *source*."""
    config = config or RouterConfig()
    logger.info("Start route generation from %s", source)
    router = Router.from_descriptors(
        load_descriptors(source, config),
        strict=config.strict,
        default_requirement=config.default_requirement,
    )

    count = len(router)
    if count == 0:
        logger.info("Result: No routes have been parsed")
    elif count == 1:
        logger.info("Result: 1 route has been parsed")
    else:
        logger.info("Result: %d routes have been parsed", count)
    return router
