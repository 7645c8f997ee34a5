"""Shared type aliases used across routelocale modules."""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from routelocale.route import RouteNode

# Trailing-slash normalizer — (path, trailing_slash policy, is_relative_child) -> path
PathNormalizer: TypeAlias = Callable[[str, "bool | None", bool], str]

# Route sorter — may raise; failures are ignored by make_routes()
RouteSorter: TypeAlias = Callable[[Sequence["RouteNode"]], Sequence["RouteNode"]]
