"""Page scanner — derive route entries from a directory of page files.

Walks a ``pages/`` tree depth-first and maps each page file to a route
path using a file-path convention::

    pages/index.astro          -> /
    pages/about.md             -> /about
    pages/blog/index.astro     -> /blog
    pages/blog/[slug].astro    -> /blog/[slug]
    pages/docs/[...path].mdx   -> /docs/[...path]

Skipped: names starting with ``_``, ``404.*`` and ``500.*`` error pages,
the ``api/`` directory (endpoints, not pages), and files without a
recognised page extension.

Scanning is best-effort: a directory that cannot be listed is skipped and
the walk continues with its siblings.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from burrow._types import ParamName, RoutePath
from burrow.pages.segments import (
    extract_param_names,
    file_to_segment,
    has_page_extension,
    is_index,
)

_IGNORE = re.compile(r"^_|^404\.|^500\.")

# Directory holding API endpoints rather than pages
_API_DIR = "api"


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A single page route discovered by :func:`scan`.

    Attributes:
        route_path: ``/``-rooted path pattern with ``[name]`` placeholders.
            Never ends with ``/`` except for the root route.
        params: Placeholder names in left-to-right order.
        source: The page file this route was derived from.

    """

    route_path: RoutePath
    params: tuple[ParamName, ...]
    source: Path

    @property
    def is_dynamic(self) -> bool:
        """True if the route has at least one placeholder."""
        return bool(self.params)


def scan(root_dir: Path | str) -> tuple[RouteEntry, ...]:
    """Scan *root_dir* for page files and return their route entries.

    Entries are ordered depth-first, siblings sorted by name, so repeated
    scans of an unchanged tree return equal results.  Duplicated route
    paths are kept; see :class:`burrow.pages.table.RouteTable` for
    collision handling.  Returns an empty tuple when *root_dir* does not
    exist or cannot be read.

    """
    root = Path(root_dir)
    results: list[RouteEntry] = []
    _walk(root, root, results)
    return tuple(results)


def _walk(root: Path, directory: Path, results: list[RouteEntry]) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError:
        return

    for entry in entries:
        if _IGNORE.search(entry.name):
            continue

        # A listable but unsearchable directory fails here, per entry
        try:
            is_dir = entry.is_dir()
        except OSError:
            continue

        if is_dir:
            if entry.name == _API_DIR:
                continue
            _walk(root, entry, results)
            continue

        if not has_page_extension(entry.name):
            continue

        route_path = _derive_route_path(entry, root)
        results.append(RouteEntry(
            route_path=route_path,
            params=extract_param_names(route_path),
            source=entry,
        ))


def _derive_route_path(page_file: Path, root: Path) -> str:
    """Derive a route path from a page file's position relative to *root*.

    ``pages/about.md``         -> ``/about``
    ``pages/blog/index.astro`` -> ``/blog``
    ``pages/index.astro``      -> ``/``

    """
    segments = [*page_file.parent.relative_to(root).parts, file_to_segment(page_file.name)]

    # "index" at any depth means the parent path
    if is_index(segments[-1]):
        segments.pop()

    if not segments:
        return "/"
    return "/" + "/".join(segments)


def is_page_file(path: Path | str, pages_root: Path | str) -> bool:
    """True if *path* is a page file somewhere under *pages_root*.

    Used to filter file-watcher events before requesting a rescan; the
    ignore rules of :func:`scan` are not applied here.

    """
    candidate = Path(path)
    if not candidate.is_relative_to(Path(pages_root)):
        return False
    return has_page_extension(candidate.name)
