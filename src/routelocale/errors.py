"""routelocale exception hierarchy.

Shared across options validation, route loading, page option resolution,
and the CLI so every module raises and catches the same types.
"""


class RouteLocaleError(Exception):
    """Base for all routelocale-specific errors."""


class ConfigurationError(RouteLocaleError):
    """Raised when localization options are invalid.

    Raised by ``LocalizeOptions.validate()`` at the start of
    ``make_routes()``, before any route is expanded.
    """


class RouteDefinitionError(RouteLocaleError):
    """Raised when a plain-dict route definition cannot be turned into a RouteNode."""


class PageOptionsError(RouteLocaleError):
    """Raised when per-page locale options have the wrong shape.

    Page options come from the ``pages`` mapping or from an attribute on
    the route's component; both are user input and are checked on read.
    """
