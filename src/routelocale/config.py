"""Localization options.

LocalizeOptions is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from routelocale.errors import ConfigurationError
from routelocale.strategies import Strategy

# camelCase keys accepted by from_mapping(), as written in JS-style configs
_KEY_ALIASES: dict[str, str] = {
    "defaultLocale": "default_locale",
    "locales": "locale_codes",
    "localeCodes": "locale_codes",
    "defaultLocaleRouteNameSuffix": "default_locale_route_name_suffix",
    "routesNameSeparator": "routes_name_separator",
    "differentDomains": "different_domains",
    "includeUnprefixedFallback": "include_unprefixed_fallback",
    "trailingSlash": "trailing_slash",
    "sortRoutes": "sort_routes",
    "parsePages": "parse_pages",
    "pagesDir": "pages_dir",
}


@dataclass(frozen=True, slots=True)
class LocalizeOptions:
    """Options for one ``make_routes()`` run. Immutable after creation.

    Every field has a default except the locales themselves::

        options = LocalizeOptions(
            default_locale="en",
            locale_codes=("en", "fr"),
            strategy=Strategy.PREFIX,
        )
    """

    # Locales
    default_locale: str | None = None
    locale_codes: tuple[str, ...] = ()

    # Route naming: "about" -> "about___en" -> "about___en___default"
    default_locale_route_name_suffix: str = "default"
    routes_name_separator: str = "___"

    # URL strategy
    strategy: Strategy = Strategy.PREFIX_EXCEPT_DEFAULT
    different_domains: bool = False  # One domain per locale, never prefix
    include_unprefixed_fallback: bool = False  # PREFIX only

    # None leaves paths untouched; True/False forces or strips the trailing slash
    trailing_slash: bool | None = None

    sort_routes: bool = True

    # Page options: from component attributes (parse_pages) or the pages mapping
    parse_pages: bool = False
    pages: Mapping[str, Any] = field(default_factory=dict)
    pages_dir: str = "pages"

    def validate(self) -> None:
        """Check the options and raise on the first problem found.

        Raises:
            ConfigurationError: If locales are missing, duplicated or not
                strings, if the default locale is not configured, if the
                strategy is unknown, or if the name separator is empty.
        """
        if isinstance(self.locale_codes, str) or not isinstance(self.locale_codes, (list, tuple)):
            msg = (
                f"locale_codes must be a tuple or list of locale codes, "
                f"got {type(self.locale_codes).__name__} {self.locale_codes!r}."
            )
            raise ConfigurationError(msg)
        if not self.locale_codes:
            msg = "locale_codes must contain at least one locale."
            raise ConfigurationError(msg)
        for code in self.locale_codes:
            if not isinstance(code, str) or not code:
                msg = f"Locale codes must be non-empty strings, got {code!r}."
                raise ConfigurationError(msg)
        if len(set(self.locale_codes)) != len(self.locale_codes):
            msg = f"Duplicate locale codes in {list(self.locale_codes)!r}."
            raise ConfigurationError(msg)
        if self.default_locale is not None and self.default_locale not in self.locale_codes:
            msg = (
                f"Default locale {self.default_locale!r} is not one of "
                f"the configured locales {list(self.locale_codes)!r}."
            )
            raise ConfigurationError(msg)
        Strategy.coerce(self.strategy)
        if not self.routes_name_separator:
            msg = "routes_name_separator must not be empty."
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LocalizeOptions":
        """Build options from a JSON-style mapping.

        Accepts field names or their camelCase aliases (``defaultLocale``,
        ``locales``, ``trailingSlash``...).  ``locales`` may list plain codes
        or objects with a ``code`` key.

        Raises:
            ConfigurationError: On unknown keys or malformed locale entries.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                msg = f"Unknown option {key!r}."
                raise ConfigurationError(msg)
            kwargs[name] = value

        if "locale_codes" in kwargs:
            kwargs["locale_codes"] = _locale_codes(kwargs["locale_codes"])
        if "strategy" in kwargs:
            kwargs["strategy"] = Strategy.coerce(kwargs["strategy"])
        return cls(**kwargs)


def _locale_codes(value: Any) -> tuple[str, ...]:
    """Normalise a ``locales`` config value to a tuple of codes."""
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        msg = f"locales must be a list, got {type(value).__name__}."
        raise ConfigurationError(msg)
    codes: list[str] = []
    for item in value:
        if isinstance(item, Mapping):
            if "code" not in item:
                msg = f"Locale object {dict(item)!r} has no 'code' key."
                raise ConfigurationError(msg)
            codes.append(item["code"])
        else:
            codes.append(item)
    return tuple(codes)
