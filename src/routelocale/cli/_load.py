"""JSON loading for ``routelocale expand``.

Turns the routes file, the optional config file and the command-line
overrides into ``RouteNode`` objects and a ``LocalizeOptions``.
"""

import argparse
import json
from pathlib import Path
from typing import Any

from routelocale.config import LocalizeOptions
from routelocale.errors import ConfigurationError, RouteDefinitionError
from routelocale.route import RouteNode


def read_json(path: str | Path) -> Any:
    """Read and parse a UTF-8 JSON file."""
    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_routes(path: str | Path) -> list[RouteNode]:
    """Load a route tree from a JSON file holding a list of route objects.

    Raises:
        RouteDefinitionError: If the document is not a list or a route is malformed.
    """
    data = read_json(path)
    if not isinstance(data, list):
        msg = f"{path}: expected a list of routes, got {type(data).__name__}."
        raise RouteDefinitionError(msg)
    return [RouteNode.from_dict(item) for item in data]


def load_options(args: argparse.Namespace) -> LocalizeOptions:
    """Build options from ``--config`` with command-line flags layered on top."""
    data: dict[str, Any] = {}
    if args.config:
        config = read_json(args.config)
        if not isinstance(config, dict):
            msg = f"{args.config}: expected an object, got {type(config).__name__}."
            raise ConfigurationError(msg)
        data.update(config)

    if args.locales:
        data["locale_codes"] = [code.strip() for code in args.locales.split(",") if code.strip()]
    if args.default_locale:
        data["default_locale"] = args.default_locale
    if args.strategy:
        data["strategy"] = args.strategy
    if args.no_sort:
        data["sort_routes"] = False

    return LocalizeOptions.from_mapping(data)
