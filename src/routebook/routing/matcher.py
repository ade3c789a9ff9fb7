"""Per-request matching of a compiled route against a path and method.

The matcher walks the route's segments left to right with a cursor into
the path. A parameter followed by a literal is bounded by the first
occurrence of that literal, so ``{id}`` in ``/user/{id}/edit`` never
swallows ``/edit``. Each route gets a single parse; there is no
backtracking.
"""

import logging

from routebook.routing.route import Literal, Route, RouteMatch

logger = logging.getLogger("routebook.router")


def attempt(route: Route, path: str, method: str) -> RouteMatch | None:
    """Match *path* and *method* against *route*.

    Returns a fresh ``RouteMatch`` on success, ``None`` otherwise. The
    route itself is never modified.
    """
    if not route.allows(method):
        return None

    params = _match_segments(route, path)
    if params is None:
        return None

    logger.debug('Route "%s" matches "%s".', route.name, path)
    language = params.get(route.language_key) if route.language_key else None
    return RouteMatch(route=route, path_params=params, language=language)


def _match_segments(route: Route, path: str) -> dict[str, str] | None:
    """Return the captured parameters, or ``None`` if *path* does not match.

    A capture is the regex engine's leftmost-first match at offset 0 of
    the candidate, so ``a|ab`` captures ``a`` from ``ab``.
    """
    segments = route.segments
    params: dict[str, str] = {}
    cursor = 0

    for index, seg in enumerate(segments):
        if isinstance(seg, Literal):
            if not path.startswith(seg.text, cursor):
                return None
            cursor += len(seg.text)
            continue

        candidate = path[cursor:]
        following = segments[index + 1] if index + 1 < len(segments) else None
        if isinstance(following, Literal):
            position = candidate.find(following.text)
            if position == -1:
                return None
            candidate = candidate[:position]

        found = seg.pattern.match(candidate)
        if found is None:
            return None
        params[seg.name] = found.group()
        cursor += found.end()

    if cursor != len(path):
        return None
    return params
