"""Route helpers — a route id bound to its entry in the route table.

::

    table = RouteTable.from_entries(scan(pages))
    post = create_route("/blog/[slug]", table)

    post.path({"slug": "hello"}, locale="fr")      # "/fr/blog/hello"
    post.params_from(request.path_params)            # {"slug": "hello"}
    post.link(RouteOptions(to="/about"))             # "/about"

Unlike :func:`burrow.urls.resolve`, every helper call checks the
reference against the table and refuses to leave placeholders unfilled.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from burrow._errors import RouteReferenceError
from burrow.pages.segments import bare_param_name
from burrow.pages.table import check_param_names
from burrow.urls import RouteOptions, resolve

if TYPE_CHECKING:
    from burrow.pages.scanner import RouteEntry
    from burrow.pages.table import RouteTable


@dataclass(frozen=True, slots=True)
class RouteHelper:
    """Helpers for one route, created by :func:`create_route`."""

    entry: RouteEntry
    table: RouteTable

    @property
    def route_id(self) -> str:
        return self.entry.route_path

    def params_from(self, values: Mapping[str, str]) -> dict[str, str]:
        """Pick this route's params out of *values*.

        Catch-all params may be supplied under their bare name (``path``
        for ``[...path]``).  The result is keyed by raw name, ready for
        :meth:`path`.

        Raises:
            RouteReferenceError: If a param is missing from *values*.

        """
        picked: dict[str, str] = {}
        for name in self.entry.params:
            if name in values:
                picked[name] = values[name]
            elif bare_param_name(name) in values:
                picked[name] = values[bare_param_name(name)]
            else:
                msg = f"Route {self.route_id!r}: missing param {name!r}"
                raise RouteReferenceError(msg)
        return picked

    def path(
        self,
        params: Mapping[str, str] | None = None,
        *,
        locale: str | None = None,
        search: Mapping[str, str] | None = None,
        hash: str | None = None,  # noqa: A002
    ) -> str:
        """Resolve this route with exactly its params."""
        check_param_names(self.entry, params or {})
        options = RouteOptions(
            to=self.route_id,
            params=params,
            locale=locale,
            search=search,
            hash=hash,
        )
        return resolve(options, strict=True)

    def link(self, options: RouteOptions) -> str:
        """Resolve a destination route (redirect or rewrite target).

        Raises:
            RouteReferenceError: If ``options.to`` is not in the table or
                its params do not match.

        """
        self.table.check(options)
        return resolve(options, strict=True)


def create_route(route_id: str, table: RouteTable) -> RouteHelper:
    """Bind *route_id* to its entry in *table*.

    Raises:
        RouteReferenceError: If *route_id* is not a known route.

    """
    return RouteHelper(entry=table.require(route_id), table=table)
