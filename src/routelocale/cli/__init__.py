"""routelocale CLI — inspect the localized routes generated for a route tree.

Entry point registered as ``routelocale`` in ``pyproject.toml``::

    [project.scripts]
    routelocale = "routelocale.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routelocale`` command."""
    parser = argparse.ArgumentParser(
        prog="routelocale",
        description="routelocale — expand a route tree into localized routes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routelocale expand -----------------------------------------------
    expand_parser = subparsers.add_parser("expand", help="Expand a JSON route tree")
    expand_parser.add_argument("routes", help="JSON file holding a list of routes")
    expand_parser.add_argument(
        "--config",
        default=None,
        help="JSON file holding localization options",
    )
    expand_parser.add_argument(
        "--locales",
        default=None,
        help="Comma-separated locale codes (e.g. en,fr,de)",
    )
    expand_parser.add_argument("--default-locale", default=None, help="Default locale code")
    expand_parser.add_argument(
        "--strategy",
        default=None,
        choices=["no_prefix", "prefix", "prefix_except_default", "prefix_and_default"],
        help="URL strategy",
    )
    expand_parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep expansion order instead of sorting routes",
    )
    expand_parser.add_argument(
        "--json",
        action="store_true",
        help="Print localized routes and the custom path index as JSON",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "expand":
        from routelocale.cli._expand import run_expand

        run_expand(args)
