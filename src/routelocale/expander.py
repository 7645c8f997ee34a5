"""Route tree expansion: one route per locale, plus the custom path index.

``make_routes()`` walks every top-level route once with the full locale
set.  Each route is copied per eligible locale, renamed
(``about`` -> ``about___fr``), given its custom path if the page defines
one, prefixed according to the strategy, and its children are expanded
for that single locale.  Every emitted route whose source route is named
is recorded in the :class:`CustomPathIndex`.

Emission order within one locale:

1. children (inside the copy, recursively)
2. the unprefixed default-locale copy (``prefix_and_default``, root routes)
3. the unprefixed fallback redirect (``prefix`` with fallback enabled)
4. the localized copy itself
"""

import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from routelocale._internal.types import PathNormalizer, RouteSorter
from routelocale.config import LocalizeOptions
from routelocale.index import CustomPathIndex
from routelocale.pages.resolve import resolver_for
from routelocale.pages.types import PageDisabled, PageLocaleOptions, PageOptionsResolver
from routelocale.paths import adjust_trailing_slash
from routelocale.route import RouteNode
from routelocale.sorting import sort_routes
from routelocale.strategies import StrategyPolicy, policy_for

logger = logging.getLogger("routelocale")


@dataclass(frozen=True, slots=True)
class LocalizedRoutes:
    """Result of a ``make_routes()`` run."""

    localized_routes: list[RouteNode]
    custom_paths_map: CustomPathIndex


def effective_locales(
    allowed_locales: Sequence[str],
    page_options: PageLocaleOptions,
) -> list[str]:
    """Intersect *allowed_locales* with the page's restriction, keeping allowed order."""
    restriction = page_options.locales
    if not restriction:
        return list(allowed_locales)
    return [locale for locale in allowed_locales if locale in restriction]


class RouteExpander:
    """Recursive route rewriter bound to one set of options and one index.

    Usage::

        index = CustomPathIndex()
        expander = RouteExpander(options, resolver=resolver, index=index)
        routes = expander.expand(RouteNode("/about", name="about"), ("en", "fr"))
    """

    __slots__ = ("_index", "_normalizer", "_options", "_policy", "_resolver")

    def __init__(
        self,
        options: LocalizeOptions,
        *,
        resolver: PageOptionsResolver,
        index: CustomPathIndex,
        normalizer: PathNormalizer = adjust_trailing_slash,
    ) -> None:
        self._options = options
        self._policy: StrategyPolicy = policy_for(options.strategy)
        self._resolver = resolver
        self._index = index
        self._normalizer = normalizer

    def expand(
        self,
        route: RouteNode,
        allowed_locales: Sequence[str],
        parent_path: str = "",
        is_default_extra_tree: bool = False,
    ) -> list[RouteNode]:
        """Expand *route* into its localized copies, in emission order.

        Args:
            route: The source route (never mutated).
            allowed_locales: Locales to expand into, before page restrictions.
            parent_path: Unprefixed path of the enclosing routes, ``""`` at root.
            is_default_extra_tree: True inside the children of an unprefixed
                default-locale copy (``prefix_and_default``).
        """
        # Pure redirects pass through untouched.
        if route.is_redirect_only:
            return [route]

        page_options = self._resolver(route)
        if isinstance(page_options, PageDisabled):
            return [route]

        emitted: list[RouteNode] = []
        for locale in effective_locales(allowed_locales, page_options):
            self._expand_for_locale(
                route,
                locale,
                page_options,
                parent_path,
                is_default_extra_tree,
                emitted,
            )
        return emitted

    def _expand_for_locale(
        self,
        route: RouteNode,
        locale: str,
        page_options: PageLocaleOptions,
        parent_path: str,
        is_default_extra_tree: bool,
        emitted: list[RouteNode],
    ) -> None:
        options = self._options
        policy = self._policy
        separator = options.routes_name_separator
        default_suffix = separator + options.default_locale_route_name_suffix

        name = f"{route.name}{separator}{locale}" if route.name else route.name
        path = page_options.paths.get(locale) or route.path
        children = self._expand_children(route, locale, parent_path + path, is_default_extra_tree)

        if policy.adds_default_route(locale, options.default_locale):
            if not parent_path:
                extra_children = self._expand_children(route, locale, path, True)
                default_route = replace(
                    route,
                    name=name + default_suffix if name else name,
                    path=self._normalize(path, False),
                    children=extra_children,
                )
                self._emit(default_route, route, locale, parent_path, emitted)
            elif is_default_extra_tree and name:
                name += default_suffix

        is_relative_child = bool(parent_path) and not path.startswith("/")
        should_prefix = (
            not options.different_domains
            and not is_relative_child
            and policy.prefixes(locale, options.default_locale)
        )
        if should_prefix:
            path = f"/{locale}{path}"
        path = self._normalize(path, is_relative_child)

        if (
            should_prefix
            and options.include_unprefixed_fallback
            and policy.adds_unprefixed_fallback(locale, options.default_locale)
        ):
            fallback = RouteNode(path=route.path, redirect=path)
            self._emit(fallback, route, locale, parent_path, emitted)

        localized = replace(route, name=name, path=path, children=children)
        self._emit(localized, route, locale, parent_path, emitted)

    def _expand_children(
        self,
        route: RouteNode,
        locale: str,
        parent_path: str,
        is_default_extra_tree: bool,
    ) -> tuple[RouteNode, ...] | None:
        if route.children is None:
            return None
        expanded: list[RouteNode] = []
        for child in route.children:
            expanded.extend(self.expand(child, [locale], parent_path, is_default_extra_tree))
        return tuple(expanded)

    def _normalize(self, path: str, is_relative_child: bool) -> str:
        # An empty path is a relative child placeholder and must stay empty.
        if not path:
            return path
        return self._normalizer(path, self._options.trailing_slash, is_relative_child)

    def _emit(
        self,
        localized: RouteNode,
        original: RouteNode,
        locale: str,
        parent_path: str,
        emitted: list[RouteNode],
    ) -> None:
        emitted.append(localized)
        if original.name:
            self._index.register(localized, original, locale, parent_path)


def make_routes(
    base_routes: Iterable[RouteNode],
    options: LocalizeOptions,
    *,
    resolver: PageOptionsResolver | None = None,
    normalizer: PathNormalizer = adjust_trailing_slash,
    sorter: RouteSorter | None = None,
) -> LocalizedRoutes:
    """Expand a single-locale route tree into a localized one.

    Args:
        base_routes: Top-level routes of the source tree.
        options: Localization options.  Validated before anything else runs.
        resolver: Per-page options source.  Defaults to the stock resolver
            selected by ``options.parse_pages``.
        normalizer: Trailing-slash policy applied to every non-empty path.
        sorter: Applied to the final list when ``options.sort_routes`` is
            set.  Defaults to :func:`sort_routes`.  Failures are ignored.

    Returns:
        The localized routes and the custom path index.

    Raises:
        ConfigurationError: If *options* are invalid.
    """
    options.validate()

    index = CustomPathIndex()
    expander = RouteExpander(
        options,
        resolver=resolver if resolver is not None else resolver_for(options),
        index=index,
        normalizer=normalizer,
    )

    localized_routes: list[RouteNode] = []
    for route in base_routes:
        localized_routes.extend(expander.expand(route, options.locale_codes))

    if options.sort_routes:
        sort = sorter if sorter is not None else sort_routes
        try:
            localized_routes = list(sort(localized_routes))
        except Exception:
            logger.debug("Route sorting failed, keeping expansion order", exc_info=True)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Custom path index:\n%s", json.dumps(index.to_dict(), indent=2))

    return LocalizedRoutes(localized_routes=localized_routes, custom_paths_map=index)
