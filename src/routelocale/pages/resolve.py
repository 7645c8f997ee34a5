"""Stock page options resolvers.

Two sources of per-page locale options are supported:

1. The ``pages`` mapping from the options, keyed by page (chunk) name::

       pages = {
           "about": {"fr": "/a-propos", "de": False},
           "admin": False,
       }

2. An attribute on the route's component (``parse_pages=True``)::

       class AboutPage:
           i18n = {"locales": ["en", "fr"], "paths": {"fr": "/a-propos"}}

``resolver_for()`` picks one based on ``LocalizeOptions.parse_pages``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from routelocale.errors import PageOptionsError
from routelocale.pages.types import (
    PAGE_DISABLED,
    PageDisabled,
    PageLocaleOptions,
    PageOptionsResolver,
)

if TYPE_CHECKING:
    from routelocale.config import LocalizeOptions
    from routelocale.route import RouteNode


def pages_config_resolver(
    pages: Mapping[str, Any],
    locale_codes: Sequence[str],
    default_locale: str | None,
    pages_dir: str = "pages",
) -> PageOptionsResolver:
    """Resolve page options from a ``pages`` mapping.

    The page key is the route's chunk name with the first ``{pages_dir}/``
    removed (matched case-insensitively, anywhere in the name), or the
    route name when the route has no chunk name.

    Per page value:

    - ``False``: localization disabled for the page.
    - A mapping of locale to ``False`` (locale dropped) or to a custom
      path string.  Locales without a custom path reuse the default
      locale's custom path, when it has one.
    """
    pages_dir_re = re.compile(re.escape(pages_dir.rstrip("/")) + "/", re.IGNORECASE)

    def resolve(route: RouteNode) -> PageLocaleOptions | PageDisabled:
        key = route.chunk_name
        if key is not None:
            key = pages_dir_re.sub("", key, count=1)
        else:
            key = route.name

        page = pages.get(key) if key else None
        if page is False:
            return PAGE_DISABLED
        if not page:
            return PageLocaleOptions()
        if not isinstance(page, Mapping):
            msg = f"pages[{key!r}] must be False or a mapping of locale options, got {page!r}."
            raise PageOptionsError(msg)

        locales = tuple(code for code in locale_codes if page.get(code) is not False)
        default_path = page.get(default_locale) if default_locale else None
        paths: dict[str, str] = {}
        for code in locales:
            custom_path = page.get(code)
            if isinstance(custom_path, str):
                paths[code] = custom_path
            elif isinstance(default_path, str):
                paths[code] = default_path
        return PageLocaleOptions(locales=locales, paths=paths)

    return resolve


def component_options_resolver(attribute: str = "i18n") -> PageOptionsResolver:
    """Resolve page options from an attribute on the route's component.

    The attribute (or key, for mapping components) holds ``False`` to
    disable localization, or a mapping with optional ``locales`` and
    ``paths`` keys.  Components without it get default options.
    """

    def resolve(route: RouteNode) -> PageLocaleOptions | PageDisabled:
        component = route.component
        if isinstance(component, Mapping):
            raw = component.get(attribute)
        else:
            raw = getattr(component, attribute, None)

        if raw is None:
            return PageLocaleOptions()
        if raw is False:
            return PAGE_DISABLED
        if not isinstance(raw, Mapping):
            msg = (
                f"Component option {attribute!r} of route {route.path!r} must be "
                f"False or a mapping, got {raw!r}."
            )
            raise PageOptionsError(msg)
        return PageLocaleOptions.from_mapping(raw, source=f"route {route.path!r}")

    return resolve


def resolver_for(options: LocalizeOptions) -> PageOptionsResolver:
    """Return the stock resolver selected by *options*."""
    if options.parse_pages:
        return component_options_resolver()
    return pages_config_resolver(
        options.pages,
        options.locale_codes,
        options.default_locale,
        options.pages_dir,
    )
