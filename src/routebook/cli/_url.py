"""``routebook url`` — build a path from a route name."""

import argparse
import sys

from routebook.cli._resolve import resolve_router
from routebook.errors import RouteNotFound


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Split ``KEY=VALUE`` arguments into a dict.

    Raises ``ValueError`` for an argument without ``=``.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params


def run_url(args: argparse.Namespace) -> None:
    """Print the path built for ``args.name``; exit 1 on failure."""
    try:
        params = parse_params(args.params)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    router = resolve_router(args)
    try:
        print(router.build(args.name, params))
    except RouteNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
