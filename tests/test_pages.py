"""Tests for routelocale.pages — page options and stock resolvers."""

import pytest

from routelocale.config import LocalizeOptions
from routelocale.errors import PageOptionsError
from routelocale.pages import (
    PAGE_DISABLED,
    PageDisabled,
    PageLocaleOptions,
    component_options_resolver,
    pages_config_resolver,
    resolver_for,
)
from routelocale.route import RouteNode

LOCALES = ("en", "fr", "de")


def _resolve(pages: dict[str, object], route: RouteNode) -> object:
    return pages_config_resolver(pages, LOCALES, "en")(route)


class TestPageLocaleOptions:
    def test_defaults(self) -> None:
        options = PageLocaleOptions()
        assert options.locales is None
        assert options.paths == {}

    def test_from_mapping(self) -> None:
        options = PageLocaleOptions.from_mapping({"locales": ["en", "fr"], "paths": {"fr": "/a-propos"}})
        assert options == PageLocaleOptions(locales=("en", "fr"), paths={"fr": "/a-propos"})

    def test_from_empty_mapping(self) -> None:
        assert PageLocaleOptions.from_mapping({}) == PageLocaleOptions()

    @pytest.mark.parametrize("locales", ["en", ["en", 1], {"en": True}])
    def test_bad_locales(self, locales: object) -> None:
        with pytest.raises(PageOptionsError, match="'locales'"):
            PageLocaleOptions.from_mapping({"locales": locales})

    def test_bad_paths(self) -> None:
        with pytest.raises(PageOptionsError, match="'paths'"):
            PageLocaleOptions.from_mapping({"paths": ["/a-propos"]})

    def test_bad_custom_path(self) -> None:
        with pytest.raises(PageOptionsError, match="custom path for 'fr'"):
            PageLocaleOptions.from_mapping({"paths": {"fr": False}})


class TestPageDisabled:
    def test_repr(self) -> None:
        assert repr(PAGE_DISABLED) == "PAGE_DISABLED"

    def test_distinct_from_empty_options(self) -> None:
        assert isinstance(PAGE_DISABLED, PageDisabled)
        assert PAGE_DISABLED != PageLocaleOptions()


class TestPagesConfigResolver:
    def test_unknown_page(self) -> None:
        assert _resolve({}, RouteNode("/about", name="about")) == PageLocaleOptions()

    def test_unnamed_route(self) -> None:
        assert _resolve({"about": False}, RouteNode("/about")) == PageLocaleOptions()

    def test_disabled(self) -> None:
        assert _resolve({"about": False}, RouteNode("/about", name="about")) is PAGE_DISABLED

    def test_chunk_name_key(self) -> None:
        route = RouteNode("/about", name="about-page", chunk_name="pages/about")
        assert _resolve({"about": False}, route) is PAGE_DISABLED

    def test_chunk_name_takes_precedence_over_name(self) -> None:
        route = RouteNode("/about", name="about", chunk_name="pages/about-us")
        assert _resolve({"about": False}, route) == PageLocaleOptions()

    def test_custom_pages_dir(self) -> None:
        resolver = pages_config_resolver({"about": False}, LOCALES, "en", pages_dir="views/")
        assert resolver(RouteNode("/about", chunk_name="views/about")) is PAGE_DISABLED

    def test_chunk_name_pages_dir_case_insensitive(self) -> None:
        route = RouteNode("/about", chunk_name="Pages/about")
        assert _resolve({"about": False}, route) is PAGE_DISABLED

    def test_chunk_name_pages_dir_not_leading(self) -> None:
        route = RouteNode("/about", chunk_name="app/pages/about")
        assert _resolve({"app/about": False}, route) is PAGE_DISABLED

    def test_chunk_name_only_first_pages_dir_removed(self) -> None:
        route = RouteNode("/about", chunk_name="pages/pages/about")
        assert _resolve({"pages/about": False}, route) is PAGE_DISABLED

    def test_custom_paths_and_exclusions(self) -> None:
        options = _resolve(
            {"about": {"fr": "/a-propos", "de": False}},
            RouteNode("/about", name="about"),
        )
        assert options == PageLocaleOptions(locales=("en", "fr"), paths={"fr": "/a-propos"})

    def test_default_locale_path_fallback(self) -> None:
        options = _resolve(
            {"about": {"en": "/about-us", "fr": "/a-propos"}},
            RouteNode("/about", name="about"),
        )
        assert options == PageLocaleOptions(
            locales=LOCALES,
            paths={"en": "/about-us", "fr": "/a-propos", "de": "/about-us"},
        )

    def test_bad_page_value(self) -> None:
        with pytest.raises(PageOptionsError, match=r"pages\['about'\]"):
            _resolve({"about": "/about-us"}, RouteNode("/about", name="about"))


class TestComponentOptionsResolver:
    def test_attribute(self) -> None:
        class Page:
            i18n = {"paths": {"fr": "/a-propos"}}

        options = component_options_resolver()(RouteNode("/about", component=Page))
        assert options == PageLocaleOptions(paths={"fr": "/a-propos"})

    def test_disabled(self) -> None:
        class Page:
            i18n = False

        assert component_options_resolver()(RouteNode("/about", component=Page)) is PAGE_DISABLED

    def test_mapping_component(self) -> None:
        route = RouteNode("/about", component={"nuxtI18n": {"locales": ["fr"]}})
        options = component_options_resolver("nuxtI18n")(route)
        assert options == PageLocaleOptions(locales=("fr",))

    def test_missing_attribute(self) -> None:
        route = RouteNode("/about", component="pages/about.vue")
        assert component_options_resolver()(route) == PageLocaleOptions()

    def test_bad_value(self) -> None:
        class Page:
            i18n = ["en"]

        with pytest.raises(PageOptionsError, match="must be False or a mapping"):
            component_options_resolver()(RouteNode("/about", component=Page))


class TestResolverFor:
    def test_pages_mapping(self) -> None:
        options = LocalizeOptions(locale_codes=("en",), pages={"about": False})
        assert resolver_for(options)(RouteNode("/about", name="about")) is PAGE_DISABLED

    def test_parse_pages(self) -> None:
        class Page:
            i18n = False

        options = LocalizeOptions(locale_codes=("en",), parse_pages=True, pages={"about": {}})
        assert resolver_for(options)(RouteNode("/about", name="about", component=Page)) is PAGE_DISABLED
