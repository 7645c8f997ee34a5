"""RouteNode frozen dataclass and its plain-dict conversion."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from routelocale.errors import RouteDefinitionError


@dataclass(frozen=True, slots=True)
class RouteNode:
    """A node in a client-side route tree.

    Localized copies are made with ``dataclasses.replace`` so the input
    tree is never mutated.

    Attributes:
        path: Absolute (``/about``) or, for children, relative (``team``) path.
        name: Optional route name.  Localized copies get ``name___{locale}``.
        redirect: Redirect target.  A route with a redirect and no component
            is passed through unlocalized.
        component: Opaque page reference (module, class, template name...).
        children: Nested routes, or ``None`` for a leaf.
        chunk_name: Page key the route was generated from, used to look up
            per-page options (e.g. ``pages/about``).
    """

    path: str
    name: str | None = None
    redirect: str | None = None
    component: Any = None
    children: tuple["RouteNode", ...] | None = None
    chunk_name: str | None = None

    @property
    def is_redirect_only(self) -> bool:
        """True for a pure redirect: ``redirect`` set and no component."""
        return bool(self.redirect) and self.component is None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RouteNode":
        """Build a route tree from a plain dict (as loaded from JSON).

        Recognised keys: ``path``, ``name``, ``redirect``, ``component``,
        ``children`` and ``chunkName`` (or ``chunk_name``).

        Raises:
            RouteDefinitionError: If *data* is not a mapping, has no string
                ``path``, or has a non-list ``children``.
        """
        if not isinstance(data, Mapping):
            msg = f"Route definition must be an object, got {type(data).__name__}."
            raise RouteDefinitionError(msg)
        path = data.get("path")
        if not isinstance(path, str):
            msg = f"Route definition {dict(data)!r} has no string 'path'."
            raise RouteDefinitionError(msg)

        children: tuple[RouteNode, ...] | None = None
        raw_children = data.get("children")
        if raw_children is not None:
            if not isinstance(raw_children, (list, tuple)):
                msg = f"Route {path!r} has non-list 'children'."
                raise RouteDefinitionError(msg)
            children = tuple(cls.from_dict(child) for child in raw_children)

        return cls(
            path=path,
            name=data.get("name"),
            redirect=data.get("redirect"),
            component=data.get("component"),
            children=children,
            chunk_name=data.get("chunkName", data.get("chunk_name")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Dump the route tree to a plain dict, omitting unset keys.

        ``component`` is included only when it is JSON-friendly (a string).
        """
        out: dict[str, Any] = {"path": self.path}
        if self.name is not None:
            out["name"] = self.name
        if self.redirect is not None:
            out["redirect"] = self.redirect
        if isinstance(self.component, str):
            out["component"] = self.component
        if self.chunk_name is not None:
            out["chunkName"] = self.chunk_name
        if self.children is not None:
            out["children"] = [child.to_dict() for child in self.children]
        return out
