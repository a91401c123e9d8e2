"""Declaration generator — emit a typing stub for the route table.

Renders a ``.pyi`` file that narrows route ids and their params::

    RouteId: TypeAlias = Literal["/", "/blog", "/blog/[slug]"]

    BlogSlugParams = TypedDict("BlogSlugParams", {"slug": str})

    @overload
    def path(to: Literal["/blog/[slug]"], params: BlogSlugParams, *, ...) -> str: ...

Routes without params get an overload with no ``params`` argument.  The
functional ``TypedDict`` form keeps raw names such as ``...path`` usable
as keys.

Output depends only on the table, so regenerating an unchanged table
produces identical bytes, and :func:`write_declarations` skips the write.
"""

from __future__ import annotations

import json
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from burrow._errors import GenerateError
from burrow.pages.scanner import scan
from burrow.pages.table import RouteTable

if TYPE_CHECKING:
    from burrow.config import BurrowConfig
    from burrow.pages.scanner import RouteEntry

_HEADER = """\
# Generated by burrow from the pages directory. Do not edit.
# Regenerated whenever a page file is added or removed.

from collections.abc import Mapping
from typing import Literal, Never, TypeAlias, TypedDict, overload

from burrow.urls import RouteOptions as RouteOptions
from burrow.urls import resolve as resolve
"""

# Runtime half of the generated module; the stub beside it types ``path``
_SHIM = """\
# Generated by burrow from the pages directory. Do not edit.
# Route ids and params are typed by the .pyi stub beside this module.

from burrow.urls import RouteOptions, path, resolve

__all__ = ["RouteOptions", "path", "resolve"]
"""

_KEYWORD_ARGS = """\
    *,
    locale: str | None = ...,
    search: Mapping[str, str] | None = ...,
    hash: str | None = ...,
    strict: bool = ...,
"""

_WORD = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True, slots=True)
class GenerateResult:
    """Outcome of one :func:`generate_routes` run.

    Attributes:
        table: The route table the declarations were rendered from.
        output_path: Where the declarations live.
        written: False when the file already held identical content.
        duration_ms: Wall time for scan, render, and write.

    """

    table: RouteTable
    output_path: Path
    written: bool
    duration_ms: float


def generate_declarations(table: RouteTable) -> str:
    """Render the declaration stub for *table*."""
    parts = [_HEADER]

    if not len(table):
        parts.append("\nRouteId: TypeAlias = Never\n")
        params_arg = "    params: Mapping[str, str] | None = ...,\n"
        parts.append(_signature("RouteId", params_arg, overloaded=False))
        return "".join(parts)

    ids = "".join(f"    {_literal(route_id)},\n" for route_id in table.route_ids)
    parts.append(f"\nRouteId: TypeAlias = Literal[\n{ids}]\n")

    names = _params_type_names(table.entries)
    typed_dicts = [
        _typed_dict(names[entry.route_path], entry.params)
        for entry in table.entries
        if entry.params
    ]
    if typed_dicts:
        parts.append("\n" + "".join(typed_dicts))

    # A lone signature must not be marked @overload
    overloaded = len(table) > 1
    for entry in table.entries:
        params_type = names.get(entry.route_path)
        params_arg = f"    params: {params_type},\n" if params_type else ""
        to_type = f"Literal[{_literal(entry.route_path)}]"
        parts.append(_signature(to_type, params_arg, overloaded=overloaded))

    return "".join(parts)


def write_declarations(table: RouteTable, output_path: Path) -> bool:
    """Write the declarations for *table* to *output_path*.

    *output_path* is a ``.pyi`` stub; a module of the same name is written
    beside it so that ``from <stem> import path`` is typed by the stub.
    Both files are fully regenerated, but left untouched when their
    content would not change.

    Returns:
        True if either file was written.

    Raises:
        GenerateError: If the stub name is not a module name, or a file
            cannot be written.

    """
    if output_path.suffix != ".pyi" or not output_path.stem.isidentifier():
        msg = f"Route declarations must be a .pyi file named like a module, got {output_path}"
        raise GenerateError(msg)

    stub_written = _write_if_changed(output_path, generate_declarations(table))
    shim_written = _write_if_changed(output_path.with_suffix(".py"), _SHIM)
    return stub_written or shim_written


def _write_if_changed(path: Path, content: str) -> bool:
    try:
        if path.is_file() and path.read_text(encoding="utf-8") == content:
            return False
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write route declarations to {path}: {exc}"
        raise GenerateError(msg) from exc
    return True


def generate_routes(config: BurrowConfig) -> GenerateResult:
    """Scan the configured pages directory and write its declarations.

    Raises:
        RouteCollisionError: If two pages share a route path and
            ``config.on_collision`` is ``"error"``.
        GenerateError: If the declarations cannot be written.

    """
    t0 = time.perf_counter()
    table = RouteTable.from_entries(
        scan(config.pages_path),
        on_collision=config.on_collision,
    )
    written = write_declarations(table, config.declarations_path)
    elapsed = (time.perf_counter() - t0) * 1000
    return GenerateResult(
        table=table,
        output_path=config.declarations_path,
        written=written,
        duration_ms=elapsed,
    )


def _signature(to_type: str, params_arg: str, *, overloaded: bool) -> str:
    decorator = "@overload\n" if overloaded else ""
    return (
        f"\n\n{decorator}def path(\n    to: {to_type},\n"
        f"{params_arg}{_KEYWORD_ARGS}) -> str: ...\n"
    )


def _typed_dict(name: str, params: tuple[str, ...]) -> str:
    fields = ", ".join(f"{_literal(param)}: str" for param in params)
    return f"{name} = TypedDict({_literal(name)}, {{{fields}}})\n"


def _params_type_names(entries: tuple[RouteEntry, ...]) -> dict[str, str]:
    """Map each parameterised route path to a unique TypedDict name.

    ``/blog/[slug]`` -> ``BlogSlugParams``; clashes get a numeric suffix.

    """
    names: dict[str, str] = {}
    used: set[str] = set()
    for entry in entries:
        if not entry.params:
            continue
        words = _WORD.findall(entry.route_path)
        base = "".join(word[:1].upper() + word[1:] for word in words) + "Params"
        if base[0].isdigit():
            base = "Route" + base
        name = base
        counter = 2
        while name in used:
            name = f"{base}{counter}"
            counter += 1
        used.add(name)
        names[entry.route_path] = name
    return names


def _literal(value: str) -> str:
    """Double-quoted Python string literal."""
    return json.dumps(value)
