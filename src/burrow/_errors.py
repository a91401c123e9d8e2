"""Burrow error hierarchy.

All burrow-specific errors inherit from BurrowError for easy catching.
"""


class BurrowError(Exception):
    """Base error for all burrow operations."""


class ConfigError(BurrowError):
    """Invalid or missing configuration."""


class ScanError(BurrowError):
    """Error derived from a page-tree scan."""


class RouteCollisionError(ScanError):
    """Two or more page files collapse to the same route path.

    Attributes:
        collisions: Mapping of route path to the page files that produce it.

    """

    def __init__(self, collisions: dict[str, tuple[str, ...]]) -> None:
        self.collisions = collisions
        lines = [
            f"  {route}: {', '.join(sources)}"
            for route, sources in collisions.items()
        ]
        super().__init__("Ambiguous routes:\n" + "\n".join(lines))


class RouteReferenceError(BurrowError, ValueError):
    """A route reference is malformed or names an unknown route."""


class UnresolvedParamError(RouteReferenceError):
    """A ``[placeholder]`` survived parameter substitution."""


class GenerateError(BurrowError):
    """The route declaration artifact could not be written."""
