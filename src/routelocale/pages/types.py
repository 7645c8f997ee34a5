"""Data models for per-page locale options.

Resolved once per route during expansion.  A resolver returns either a
:class:`PageLocaleOptions` or the :data:`PAGE_DISABLED` sentinel.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from routelocale.errors import PageOptionsError

if TYPE_CHECKING:
    from routelocale.route import RouteNode


@dataclass(frozen=True, slots=True)
class PageLocaleOptions:
    """Locale options for a single page.

    Attributes:
        locales: Locales the page is restricted to.  ``None`` or empty
            means every allowed locale applies.
        paths: Custom path per locale, overriding the route's own path.
    """

    locales: tuple[str, ...] | None = None
    paths: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: str = "page") -> "PageLocaleOptions":
        """Build options from ``{"locales": [...], "paths": {...}}``.

        Raises:
            PageOptionsError: If ``locales`` is not a list of strings or
                ``paths`` is not a string-to-string mapping.
        """
        locales = data.get("locales")
        if locales is not None:
            if isinstance(locales, str) or not isinstance(locales, (list, tuple)):
                msg = f"{source}: 'locales' must be a list of locale codes, got {locales!r}."
                raise PageOptionsError(msg)
            if not all(isinstance(code, str) for code in locales):
                msg = f"{source}: 'locales' must only contain strings, got {locales!r}."
                raise PageOptionsError(msg)
            locales = tuple(locales)

        paths = data.get("paths") or {}
        if not isinstance(paths, Mapping):
            msg = f"{source}: 'paths' must map locale codes to paths, got {paths!r}."
            raise PageOptionsError(msg)
        for locale, path in paths.items():
            if not isinstance(path, str):
                msg = f"{source}: custom path for {locale!r} must be a string, got {path!r}."
                raise PageOptionsError(msg)

        return cls(locales=locales, paths=dict(paths))


@dataclass(frozen=True, slots=True)
class PageDisabled:
    """Sentinel for pages with localization turned off.

    Distinct from an empty :class:`PageLocaleOptions`: a disabled route is
    passed through once, unlocalized and unduplicated.
    """

    def __repr__(self) -> str:
        return "PAGE_DISABLED"


PAGE_DISABLED: PageDisabled = PageDisabled()

# Resolver — maps a route to its page options or PAGE_DISABLED
PageOptionsResolver: TypeAlias = Callable[["RouteNode"], PageLocaleOptions | PageDisabled]
