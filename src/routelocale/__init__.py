"""routelocale — localized route trees for client-side routers.

Expands a single-locale route tree into one route per locale according to
a URL strategy, and builds an index from every named route to its
per-locale path.

Basic usage::

    from routelocale import LocalizeOptions, RouteNode, Strategy, make_routes

    routes = [RouteNode("/about", name="about", component="pages/about")]
    options = LocalizeOptions(
        default_locale="en",
        locale_codes=("en", "fr"),
        strategy=Strategy.PREFIX_EXCEPT_DEFAULT,
    )
    result = make_routes(routes, options)
    result.localized_routes        # about___en at /about, about___fr at /fr/about
    result.custom_paths_map.lookup_name("about", "fr").path  # "/fr/about"
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "PAGE_DISABLED",
    "ConfigurationError",
    "CustomPathIndex",
    "LocalizeOptions",
    "LocalizedRoutes",
    "PageLocaleOptions",
    "PageOptionsError",
    "RouteDefinitionError",
    "RouteEntry",
    "RouteExpander",
    "RouteLocaleError",
    "RouteNode",
    "Strategy",
    "make_routes",
    "sort_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routelocale`` fast while providing a clean top-level API.
    """
    if name in ("make_routes", "LocalizedRoutes", "RouteExpander"):
        from routelocale import expander as _expander

        return getattr(_expander, name)

    if name == "LocalizeOptions":
        from routelocale.config import LocalizeOptions

        return LocalizeOptions

    if name == "RouteNode":
        from routelocale.route import RouteNode

        return RouteNode

    if name == "Strategy":
        from routelocale.strategies import Strategy

        return Strategy

    if name in ("CustomPathIndex", "RouteEntry"):
        from routelocale import index as _index

        return getattr(_index, name)

    if name in ("PAGE_DISABLED", "PageLocaleOptions"):
        from routelocale.pages import types as _types

        return getattr(_types, name)

    if name == "sort_routes":
        from routelocale.sorting import sort_routes

        return sort_routes

    if name in (
        "ConfigurationError",
        "PageOptionsError",
        "RouteDefinitionError",
        "RouteLocaleError",
    ):
        from routelocale import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
