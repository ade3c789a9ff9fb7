"""Routebook CLI — inspect, match against, and validate route tables.

Entry point registered as ``routebook`` in ``pyproject.toml``::

    [project.scripts]
    routebook = "routebook.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routebook`` command."""
    parser = argparse.ArgumentParser(
        prog="routebook",
        description="Routebook — declarative route tables loaded from YAML.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first malformed route instead of skipping it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routebook routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List loaded routes")
    routes_parser.add_argument("source", help="Route file or folder")

    # -- routebook match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Find the route for a path")
    match_parser.add_argument("source", help="Route file or folder")
    match_parser.add_argument("path", help="Request path (e.g. /user/42)")
    match_parser.add_argument(
        "-m",
        "--method",
        default="get",
        help="Request method (default: get)",
    )

    # -- routebook url ----------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Build a path from a route name")
    url_parser.add_argument("source", help="Route file or folder")
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Parameter values to substitute",
    )

    # -- routebook check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Report malformed routes")
    check_parser.add_argument("source", help="Route file or folder")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.log_level is not None:
        logging.basicConfig(level=args.log_level.upper())

    if args.command == "routes":
        from routebook.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from routebook.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from routebook.cli._url import run_url

        run_url(args)
    elif args.command == "check":
        from routebook.cli._check import run_check

        run_check(args)
