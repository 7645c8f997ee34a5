"""Route ordering: more specific routes first.

A router that tries routes in order needs ``/users/new`` ahead of
``/users/:id`` and both ahead of a ``*`` catch-all.  ``sort_routes()``
gives every path a sort key built segment by segment:

- static segments rank first
- parameter segments (``:id``, ``{id}``) next
- catch-all segments (``*``, ``{path:path}``) last

Empty (relative placeholder) paths sort before everything else, and the
root path sorts after static routes but before dynamic ones.
"""

from collections.abc import Sequence
from dataclasses import replace

from routelocale.route import RouteNode

_STATIC = 0
_PARAM = 1
_CATCH_ALL = 2


def _segment_rank(segment: str) -> int:
    if segment.startswith("*") or segment.endswith(":path}") or segment.endswith("(.*)"):
        return _CATCH_ALL
    if ":" in segment or (segment.startswith("{") and segment.endswith("}")):
        return _PARAM
    return _STATIC


def _sort_key(route: RouteNode) -> tuple[int, tuple[tuple[int, str], ...]]:
    if not route.path:
        return (0, ())
    segments = [part for part in route.path.split("/") if part]
    if not segments:
        # Root: after any static first segment, before any dynamic one
        return (1, ((_PARAM, ""),))
    return (1, tuple((_segment_rank(part), part) for part in segments))


def sort_routes(routes: Sequence[RouteNode]) -> list[RouteNode]:
    """Return *routes* ordered most-specific first, children sorted recursively.

    The sort is stable, so routes with equal keys (e.g. a fallback
    redirect and the route it points to) keep their relative order.
    """
    ordered = sorted(routes, key=_sort_key)
    return [
        replace(route, children=tuple(sort_routes(route.children)))
        if route.children
        else route
        for route in ordered
    ]
