"""``routebook match`` — show which route handles a request."""

import argparse
import sys

from routebook.cli._resolve import resolve_router
from routebook.errors import RouteNotFound


def run_match(args: argparse.Namespace) -> None:
    """Look up ``args.path`` / ``args.method`` and print the match.

    Exits 1 with an error message when no route matches.
    """
    router = resolve_router(args)
    try:
        match = router.lookup(args.path, args.method)
    except RouteNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"route:      {match.name}")
    print(f"controller: {match.controller}")
    if match.middleware:
        print(f"middleware: {match.middleware}")
    if match.language is not None:
        print(f"language:   {match.language}")
    for key, value in match.path_params.items():
        print(f"  {key} = {value}")
