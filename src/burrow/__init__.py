"""Burrow — typed routes from a directory of page files.

Scans a pages tree into a route table, builds URLs from route references,
and generates a typing stub so that invalid routes and missing params are
caught before the program runs.

Quick start::

    import burrow

    burrow.path("/blog/[slug]", {"slug": "hello"}, locale="fr")
    # "/fr/blog/hello"

    table = burrow.RouteTable.from_entries(burrow.scan("src/pages"))
    post = burrow.create_route("/blog/[slug]", table)

Page tree conventions::

    pages/index.astro          /
    pages/blog/index.astro     /blog
    pages/blog/[slug].astro    /blog/[slug]
    pages/_draft.astro         (ignored)
    pages/api/hello.ts         (ignored)

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "BurrowConfig",
    "RouteEntry",
    "RouteIntegration",
    "RouteOptions",
    "RouteTable",
    "__version__",
    "create_route",
    "generate_routes",
    "load_config",
    "path",
    "resolve",
    "scan",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import burrow`` fast while providing a clean top-level API.
    """
    if name == "BurrowConfig":
        from burrow.config import BurrowConfig

        return BurrowConfig

    if name == "load_config":
        from burrow.config_loader import load_config

        return load_config

    if name in ("RouteOptions", "resolve", "path"):
        import burrow.urls

        return getattr(burrow.urls, name)

    if name in ("RouteEntry", "scan"):
        import burrow.pages.scanner

        return getattr(burrow.pages.scanner, name)

    if name == "RouteTable":
        from burrow.pages.table import RouteTable

        return RouteTable

    if name == "create_route":
        from burrow.routes.helper import create_route

        return create_route

    if name == "generate_routes":
        from burrow.codegen.declarations import generate_routes

        return generate_routes

    if name == "RouteIntegration":
        from burrow.integration import RouteIntegration

        return RouteIntegration

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
