"""Route table — the collection of route entries from one scan.

The table is rebuilt from scratch on every scan and is immutable once
built.  It is the closed set of valid route ids: call sites validate a
route reference by membership (:meth:`RouteTable.check`) instead of
relying on the generated declarations alone.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from burrow._errors import RouteCollisionError, RouteReferenceError

if TYPE_CHECKING:
    from burrow._types import CollisionPolicy, RoutePath
    from burrow.pages.scanner import RouteEntry
    from burrow.urls import RouteOptions


def find_collisions(entries: Iterable[RouteEntry]) -> dict[str, tuple[str, ...]]:
    """Group the sources of route paths produced by more than one page file.

    Returns a mapping of route path to page-file paths in scan order;
    empty when every route path is unique.

    """
    sources: dict[str, list[str]] = {}
    for entry in entries:
        sources.setdefault(entry.route_path, []).append(str(entry.source))
    return {path: tuple(files) for path, files in sources.items() if len(files) > 1}


@dataclass(frozen=True, slots=True)
class RouteTable:
    """All route entries for one page tree, keyed by route path.

    Build with :meth:`from_entries`, which applies the collision policy.

    """

    entries: tuple[RouteEntry, ...] = ()

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[RouteEntry],
        *,
        on_collision: CollisionPolicy = "error",
    ) -> RouteTable:
        """Build a table from scanned entries.

        Args:
            entries: Route entries in scan order.
            on_collision: ``"error"`` raises when two entries share a route
                path; ``"last-wins"`` keeps the later entry in the position
                of the first.

        Raises:
            RouteCollisionError: On duplicate route paths with ``"error"``.

        """
        entries = tuple(entries)
        collisions = find_collisions(entries)
        if collisions and on_collision == "error":
            raise RouteCollisionError(collisions)

        by_path: dict[str, RouteEntry] = {}
        for entry in entries:
            by_path[entry.route_path] = entry
        return cls(entries=tuple(by_path.values()))

    @property
    def route_ids(self) -> tuple[RoutePath, ...]:
        """Route paths in table order."""
        return tuple(entry.route_path for entry in self.entries)

    def get(self, route_id: str) -> RouteEntry | None:
        """Return the entry for *route_id*, or *None*."""
        for entry in self.entries:
            if entry.route_path == route_id:
                return entry
        return None

    def require(self, route_id: str) -> RouteEntry:
        """Return the entry for *route_id*.

        Raises:
            RouteReferenceError: If *route_id* is not a known route.

        """
        entry = self.get(route_id)
        if entry is None:
            msg = f"Unknown route {route_id!r}"
            raise RouteReferenceError(msg)
        return entry

    def check(self, options: RouteOptions) -> RouteEntry:
        """Validate a route reference against the table.

        The route must exist and ``options.params`` must name exactly the
        route's parameters.

        Raises:
            RouteReferenceError: On an unknown route or a param mismatch.

        """
        entry = self.require(options.to)
        check_param_names(entry, options.params or {})
        return entry

    def __contains__(self, route_id: object) -> bool:
        return any(entry.route_path == route_id for entry in self.entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def check_param_names(entry: RouteEntry, params: Iterable[str]) -> None:
    """Raise if *params* does not name exactly the parameters of *entry*."""
    supplied = set(params)
    required = set(entry.params)
    missing = [name for name in entry.params if name not in supplied]
    extra = sorted(supplied - required)
    if not missing and not extra:
        return

    problems: list[str] = []
    if missing:
        problems.append(f"missing {', '.join(missing)}")
    if extra:
        problems.append(f"unexpected {', '.join(extra)}")
    msg = f"Route {entry.route_path!r} params: {'; '.join(problems)}"
    raise RouteReferenceError(msg)
