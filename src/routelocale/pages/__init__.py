"""Per-page locale options.

Each route is checked once during expansion: it may be restricted to a
subset of locales, given custom per-locale paths, or disabled entirely.

Usage::

    from routelocale.pages import pages_config_resolver

    resolver = pages_config_resolver(
        {"about": {"fr": "/a-propos"}},
        locale_codes=("en", "fr"),
        default_locale="en",
    )
    make_routes(routes, options, resolver=resolver)
"""

from routelocale.pages.resolve import (
    component_options_resolver,
    pages_config_resolver,
    resolver_for,
)
from routelocale.pages.types import (
    PAGE_DISABLED,
    PageDisabled,
    PageLocaleOptions,
    PageOptionsResolver,
)

__all__ = [
    "PAGE_DISABLED",
    "PageDisabled",
    "PageLocaleOptions",
    "PageOptionsResolver",
    "component_options_resolver",
    "pages_config_resolver",
    "resolver_for",
]
