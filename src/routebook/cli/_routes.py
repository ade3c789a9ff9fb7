"""``routebook routes`` — list loaded routes.

Loads the route source and prints every route in declaration order
with name, methods, path, and controller.
"""

import argparse

from routebook.cli._resolve import resolve_router


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of NAME, METHODS, PATH, and CONTROLLER."""
    router = resolve_router(args)
    if not router.routes:
        print("No routes registered.")
        return

    # Build rows: (name, methods_str, path, controller)
    rows: list[tuple[str, str, str, str]] = []
    for route in router.routes:
        methods_str = ", ".join(sorted(route.methods)) or "*"
        rows.append((route.name, methods_str, route.path, route.controller))

    headers = ("NAME", "METHODS", "PATH", "CONTROLLER")
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(3)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers))
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
