"""``routebook check`` — route table validation command.

Loads the route source without aborting on bad routes, prints every
rejected descriptor, and exits with code 1 if any were found.
"""

import argparse
import dataclasses
import sys
from pathlib import Path

from routebook.cli._resolve import config_from_args, resolve_router


def run_check(args: argparse.Namespace) -> None:
    """Validate every route under ``args.source``."""
    if not Path(args.source).exists():
        print(f"Error: Source path {args.source} not found.", file=sys.stderr)
        raise SystemExit(1)

    config = dataclasses.replace(config_from_args(args), strict=False)
    router = resolve_router(args, config)

    for error in router.rejected:
        print(f"error: {error}")

    total = len(router) + len(router.rejected)
    print(f"{len(router)}/{total} routes compiled")
    if router.rejected:
        raise SystemExit(1)
