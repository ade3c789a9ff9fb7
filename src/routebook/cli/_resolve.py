"""Route table resolution — builds a Router from CLI arguments.

Shared utility used by every subcommand to load the route source with
the configuration implied by the global flags.
"""

import argparse
import sys

from routebook.config import RouterConfig
from routebook.errors import ConfigurationError
from routebook.loader import load_router
from routebook.routing.router import Router


def config_from_args(args: argparse.Namespace) -> RouterConfig:
    """Translate global CLI flags into a ``RouterConfig``."""
    return RouterConfig(strict=getattr(args, "strict", False))


def resolve_router(args: argparse.Namespace, config: RouterConfig | None = None) -> Router:
    """Load the router for ``args.source``.

    Prints the error and exits 1 when a strict load fails.
    """
    try:
        return load_router(args.source, config or config_from_args(args))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
