"""``routelocale expand`` — print the localized routes for a route tree.

Loads routes and options, runs ``make_routes()``, and prints a table of
NAME, PATH and REDIRECT, or a JSON document with ``--json``.
"""

import argparse
import json
import sys

from routelocale.cli._load import load_options, load_routes
from routelocale.errors import RouteLocaleError
from routelocale.expander import make_routes
from routelocale.route import RouteNode


def _flatten(routes: list[RouteNode], depth: int = 0) -> list[tuple[str, str, str]]:
    """Rows of (name, path, redirect), children indented under their parent."""
    rows: list[tuple[str, str, str]] = []
    indent = "  " * depth
    for route in routes:
        rows.append((route.name or "-", f"{indent}{route.path or '(empty)'}", route.redirect or ""))
        if route.children:
            rows.extend(_flatten(list(route.children), depth + 1))
    return rows


def run_expand(args: argparse.Namespace) -> None:
    """Expand ``args.routes`` and print the result.

    Exits with status 1 on unreadable files, malformed routes or invalid
    options.
    """
    try:
        routes = load_routes(args.routes)
        options = load_options(args)
        result = make_routes(routes, options)
    except (OSError, ValueError, RouteLocaleError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        document = {
            "localizedRoutes": [route.to_dict() for route in result.localized_routes],
            "customPathsMap": result.custom_paths_map.to_dict(),
        }
        print(json.dumps(document, indent=2))
        return

    rows = _flatten(result.localized_routes)
    if not rows:
        print("No routes generated.")
        return

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "PATH", "REDIRECT"))
    sep_len = max_name + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for name, path, redirect in rows:
        print(fmt.format(name, path, redirect).rstrip())
