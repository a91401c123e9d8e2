"""Segment classifier — pure functions over one filename or path segment.

Page files map to route segments by stripping their extension::

    about.astro       -> about
    [slug].md         -> [slug]        (dynamic)
    [...path].astro   -> [...path]     (catch-all)
    index.astro       -> index         (collapses into the parent path)

Placeholders keep their bracket syntax in route paths so that they can be
substituted verbatim by :func:`burrow.urls.resolve`.
"""

import re

from burrow.config import PAGE_EXTENSIONS

# Bracketed placeholder anywhere in a route path
_PLACEHOLDER = re.compile(r"\[([^\]]+)\]")

# Prefix marking a catch-all parameter name
CATCH_ALL_PREFIX = "..."

INDEX_SEGMENT = "index"


def strip_extension(filename: str) -> str:
    """Remove a recognised page extension from *filename*.

    Names without a recognised extension are returned unchanged.

    """
    for ext in PAGE_EXTENSIONS:
        if filename.endswith(ext):
            return filename[: -len(ext)]
    return filename


# Same operation, named after the filename-to-segment step in the scanner.
file_to_segment = strip_extension


def has_page_extension(filename: str) -> bool:
    """True if *filename* ends with a recognised page extension."""
    return filename.endswith(PAGE_EXTENSIONS)


def is_dynamic(segment: str) -> bool:
    """True if *segment* is wrapped in brackets, e.g. ``[slug]``."""
    return segment.startswith("[") and segment.endswith("]")


def is_catch_all(segment: str) -> bool:
    """True if *segment* is a dynamic segment named ``...name``."""
    return segment.startswith("[" + CATCH_ALL_PREFIX) and segment.endswith("]")


def is_index(segment: str) -> bool:
    """True if *segment*, without its extension, is ``index``."""
    return strip_extension(segment) == INDEX_SEGMENT


def extract_param_names(route_path: str) -> tuple[str, ...]:
    """Return placeholder names in *route_path*, left to right.

    Catch-all names keep their ``...`` prefix::

        >>> extract_param_names("/docs/[lang]/[...path]")
        ('lang', '...path')

    """
    return tuple(match.group(1) for match in _PLACEHOLDER.finditer(route_path))


extract_params = extract_param_names


def bare_param_name(name: str) -> str:
    """Strip the catch-all prefix from a raw parameter name."""
    return name.removeprefix(CATCH_ALL_PREFIX)


def to_colon_path(route_path: str) -> str:
    """Rewrite bracket placeholders to ``:name`` form.

    ``/blog/[slug]`` -> ``/blog/:slug``; catch-alls keep their marker
    (``/docs/[...path]`` -> ``/docs/:...path``).

    """
    return _PLACEHOLDER.sub(r":\1", route_path)
