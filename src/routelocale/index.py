"""Custom path index: reverse lookup from route names and paths to localized paths.

Entries live in one append-only list.  The ``by_name`` and ``by_path``
mappings hold positions into that list, so the same entry can be reached
from several slots without aliasing mutable objects::

    index.all          -> [RouteEntry("about___en", "/about"), ...]
    index.by_name      -> {"about": {"en": 0, "fr": 1}}
    index.by_path      -> {"/about": {"en": 0, "fr": 1}}
"""

from dataclasses import dataclass
from typing import Any

from routelocale.paths import join_paths
from routelocale.route import RouteNode


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One emitted route: its localized name and localized full path."""

    name: str | None
    path: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "path": self.path}


class CustomPathIndex:
    """Index of localized routes keyed by original name and by canonical path.

    Built as a side effect of route expansion; one instance per
    ``make_routes()`` run.
    """

    __slots__ = ("all", "by_name", "by_path")

    def __init__(self) -> None:
        self.all: list[RouteEntry] = []
        # original route name -> locale -> position in self.all
        self.by_name: dict[str, dict[str, int]] = {}
        # canonical (pre-localization) full path -> locale -> position in self.all
        self.by_path: dict[str, dict[str, int]] = {}

    def register(
        self,
        localized_route: RouteNode,
        original_route: RouteNode,
        locale: str,
        parent_path: str,
    ) -> RouteEntry | None:
        """Record an emitted route.  Returns the new entry, or ``None``.

        An entry is created when the name slot for *locale* is still empty,
        or when the canonical path already has a slot for *locale*.  The
        second case lets a route sharing an already-registered path (the
        unprefixed default-locale copy, the fallback redirect) append its
        own entry.  Slots are first-write-wins; ``all`` grows on every
        created entry.
        """
        name = original_route.name
        if not name:
            return None

        canonical_path = join_paths(parent_path, original_route.path)
        name_slots = self.by_name.setdefault(name, {})
        path_slots = self.by_path.setdefault(canonical_path, {})

        if locale in name_slots and locale not in path_slots:
            return None

        entry = RouteEntry(
            name=localized_route.name,
            path=join_paths(parent_path, localized_route.path),
        )
        self.all.append(entry)
        position = len(self.all) - 1
        name_slots.setdefault(locale, position)
        path_slots.setdefault(locale, position)
        return entry

    # -- Lookups ------------------------------------------------------------

    def lookup_name(self, name: str, locale: str) -> RouteEntry | None:
        """Entry for the route originally named *name*, in *locale*."""
        position = self.by_name.get(name, {}).get(locale)
        return None if position is None else self.all[position]

    def lookup_path(self, path: str, locale: str) -> RouteEntry | None:
        """Entry for the route with canonical full *path*, in *locale*."""
        position = self.by_path.get(path, {}).get(locale)
        return None if position is None else self.all[position]

    def names_for(self, name: str) -> dict[str, RouteEntry]:
        """All per-locale entries for the route originally named *name*."""
        return {locale: self.all[pos] for locale, pos in self.by_name.get(name, {}).items()}

    def paths_for(self, path: str) -> dict[str, RouteEntry]:
        """All per-locale entries for the canonical full *path*."""
        return {locale: self.all[pos] for locale, pos in self.by_path.get(path, {}).items()}

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view with entries inlined into both lookup mappings."""
        return {
            "all": [entry.to_dict() for entry in self.all],
            "byName": {
                name: {locale: entry.to_dict() for locale, entry in self.names_for(name).items()}
                for name in self.by_name
            },
            "byPath": {
                path: {locale: entry.to_dict() for locale, entry in self.paths_for(path).items()}
                for path in self.by_path
            },
        }

    def __len__(self) -> int:
        return len(self.all)

    def __repr__(self) -> str:
        return (
            f"CustomPathIndex(entries={len(self.all)}, "
            f"names={len(self.by_name)}, paths={len(self.by_path)})"
        )
