"""Tests for routelocale.errors — exception hierarchy."""

from routelocale.errors import (
    ConfigurationError,
    PageOptionsError,
    RouteDefinitionError,
    RouteLocaleError,
)


class TestHierarchy:
    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, RouteLocaleError)

    def test_route_definition_error(self) -> None:
        assert issubclass(RouteDefinitionError, RouteLocaleError)

    def test_page_options_error(self) -> None:
        assert issubclass(PageOptionsError, RouteLocaleError)

    def test_base_is_exception(self) -> None:
        assert issubclass(RouteLocaleError, Exception)
