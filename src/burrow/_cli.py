"""Burrow CLI — burrow scan / generate / watch / resolve.

Entry point for the ``burrow`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the burrow CLI."""
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Typed routes from a directory of page files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # burrow scan
    scan_parser = subparsers.add_parser(
        "scan",
        help="List the routes discovered in the pages directory",
    )
    _add_project_args(scan_parser)

    # burrow generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write the route declarations file",
    )
    _add_project_args(generate_parser)
    generate_parser.add_argument("--output", default=None, help="Declarations file")

    # burrow watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Regenerate declarations when pages are added or removed",
    )
    _add_project_args(watch_parser)
    watch_parser.add_argument("--output", default=None, help="Declarations file")

    # burrow resolve
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Build a URL from a route reference",
    )
    resolve_parser.add_argument("to", help="Route path, e.g. /blog/[slug]")
    resolve_parser.add_argument(
        "--param", action="append", default=[], metavar="KEY=VALUE",
        help="Route param (repeatable)",
    )
    resolve_parser.add_argument("--locale", default=None, help="Locale prefix")
    resolve_parser.add_argument(
        "--search", action="append", default=[], metavar="KEY=VALUE",
        help="Query param (repeatable)",
    )
    resolve_parser.add_argument("--hash", default=None, help="URL fragment")
    resolve_parser.add_argument(
        "--strict", action="store_true", help="Fail on unfilled placeholders",
    )

    return parser


def _add_project_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument("--pages-dir", default=None, help="Pages directory under src/")


def _get_version() -> str:
    """Get the package version."""
    from burrow import __version__

    return __version__


def _parse_pairs(pairs: list[str], flag: str) -> dict[str, str]:
    """Parse repeated ``KEY=VALUE`` arguments, keeping their order."""
    result: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"{flag} expects KEY=VALUE, got {pair!r}"
            raise SystemExit(msg)
        result[key] = value
    return result


def _cmd_scan(args: argparse.Namespace) -> int:
    from burrow.config_loader import load_config
    from burrow.pages.scanner import scan
    from burrow.pages.table import find_collisions

    config = load_config(Path(args.root), pages_dir=args.pages_dir)
    entries = scan(config.pages_path)
    for entry in entries:
        params = f"  ({', '.join(entry.params)})" if entry.params else ""
        print(f"{entry.route_path}{params}")

    collisions = find_collisions(entries)
    for route_path, sources in collisions.items():
        print(
            f"[burrow] Warning: {route_path} is produced by {', '.join(sources)}",
            file=sys.stderr,
        )
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    from burrow.config_loader import load_config
    from burrow.integration import RouteIntegration

    config = load_config(
        Path(args.root),
        pages_dir=args.pages_dir,
        declarations_file=args.output,
    )
    result = RouteIntegration().config_done(config)
    if result is None:
        return 1
    if not result.written:
        print(f"[burrow] {result.output_path} is up to date", file=sys.stderr)
    return 0


def _cmd_watch(args: argparse.Namespace) -> int:
    from burrow.config_loader import load_config
    from burrow.integration import RouteIntegration
    from burrow.watcher import PageWatcher

    config = load_config(
        Path(args.root),
        pages_dir=args.pages_dir,
        declarations_file=args.output,
    )
    integration = RouteIntegration()
    integration.config_done(config)

    watcher = PageWatcher(integration)
    watcher.start()
    print(f"[burrow] Watching {config.pages_path} (Ctrl+C to stop)", file=sys.stderr)
    try:
        watcher.wait()
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()
    return 0


def _cmd_resolve(args: argparse.Namespace) -> int:
    from burrow._errors import RouteReferenceError
    from burrow.urls import RouteOptions, resolve

    options = RouteOptions(
        to=args.to,
        params=_parse_pairs(args.param, "--param") or None,
        locale=args.locale,
        search=_parse_pairs(args.search, "--search") or None,
        hash=args.hash,
    )
    try:
        print(resolve(options, strict=args.strict))
    except RouteReferenceError as exc:
        print(f"[burrow] {exc}", file=sys.stderr)
        return 1
    return 0


_COMMANDS = {
    "scan": _cmd_scan,
    "generate": _cmd_generate,
    "watch": _cmd_watch,
    "resolve": _cmd_resolve,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from burrow._errors import BurrowError

    try:
        code = _COMMANDS[args.command](args)
    except BurrowError as exc:
        print(f"[burrow] {exc}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
