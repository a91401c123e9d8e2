"""Route helpers bound to the route table.

Public API::

    from burrow.routes import create_route

    helper = create_route("/blog/[slug]", table)
    helper.path({"slug": "hello"})
"""

from burrow.routes.helper import RouteHelper, create_route

__all__ = [
    "RouteHelper",
    "create_route",
]
