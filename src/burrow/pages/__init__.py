"""Page discovery — scan a page tree into a route table.

Public API::

    from burrow.pages import RouteTable, scan

    entries = scan(Path("src/pages"))
    table = RouteTable.from_entries(entries)
"""

from burrow.pages.scanner import RouteEntry, is_page_file, scan
from burrow.pages.segments import (
    extract_param_names,
    extract_params,
    file_to_segment,
    is_catch_all,
    is_dynamic,
    is_index,
    strip_extension,
    to_colon_path,
)
from burrow.pages.table import RouteTable, find_collisions

__all__ = [
    "RouteEntry",
    "RouteTable",
    "extract_param_names",
    "extract_params",
    "file_to_segment",
    "find_collisions",
    "is_catch_all",
    "is_dynamic",
    "is_index",
    "is_page_file",
    "scan",
    "strip_extension",
    "to_colon_path",
]
