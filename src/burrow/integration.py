"""Host integration — lifecycle hooks that keep route declarations current.

A build host drives one :class:`RouteIntegration` through its lifecycle::

    integration = RouteIntegration()
    integration.config_done(config)        # initial generation
    integration.file_added(path)           # from the file watcher
    integration.file_removed(path)
    integration.build_start()              # before a production build

The integration owns the current :class:`~burrow.config.BurrowConfig` and
passes it explicitly to every scan.  Generation failures are reported on
stderr and recorded in the event log; they never propagate into the host's
build.
"""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from burrow._errors import BurrowError, ConfigError
from burrow.codegen.declarations import generate_routes
from burrow.observability.events import (
    GenerationFailed,
    PageFileChanged,
    RoutesGenerated,
    now_ns,
)
from burrow.observability.log import EventLog
from burrow.pages.scanner import is_page_file

if TYPE_CHECKING:
    from burrow.codegen.declarations import GenerateResult
    from burrow.config import BurrowConfig


class RouteIntegration:
    """Regenerates route declarations at host lifecycle moments.

    Hooks may be called from a watcher thread; generations are serialised
    so that the declarations file always reflects the latest scan.

    Args:
        log: Event log for generation events (a private one by default).
        quiet: Suppress stderr progress messages (warnings still print).

    """

    def __init__(self, log: EventLog | None = None, *, quiet: bool = False) -> None:
        self._log = log if log is not None else EventLog()
        self._quiet = quiet
        self._config: BurrowConfig | None = None
        self._last_result: GenerateResult | None = None
        self._lock = threading.Lock()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    @property
    def config(self) -> BurrowConfig | None:
        """The configuration passed to the latest ``config_done``."""
        return self._config

    @property
    def last_result(self) -> GenerateResult | None:
        """Outcome of the latest successful generation."""
        return self._last_result

    # ----- Lifecycle hooks -----

    def config_done(self, config: BurrowConfig) -> GenerateResult | None:
        """Adopt the resolved host config and generate declarations."""
        self._config = config
        return self.regenerate("config_done")

    def file_added(self, path: Path | str) -> GenerateResult | None:
        """Regenerate if *path* is a new page file."""
        return self._file_changed(Path(path), "added")

    def file_removed(self, path: Path | str) -> GenerateResult | None:
        """Regenerate if *path* was a page file."""
        return self._file_changed(Path(path), "removed")

    def build_start(self) -> GenerateResult | None:
        """Regenerate before a build so the declarations are fresh."""
        return self.regenerate("build_start")

    # ----- Generation -----

    def regenerate(self, trigger: str = "manual") -> GenerateResult | None:
        """Scan and write declarations with the current config.

        Returns *None* (with a warning on stderr) when generation fails.

        Raises:
            ConfigError: If called before ``config_done``.

        """
        config = self._require_config()
        with self._lock:
            try:
                result = generate_routes(config)
            except (BurrowError, OSError) as exc:
                print(f"[burrow] Route generation failed: {exc}", file=sys.stderr)
                self._log.append(GenerationFailed(
                    trigger=trigger,
                    error=str(exc),
                    timestamp_ns=now_ns(),
                ))
                return None

            self._last_result = result
            self._log.append(RoutesGenerated(
                path=str(result.output_path),
                route_count=len(result.table),
                written=result.written,
                trigger=trigger,
                duration_ms=result.duration_ms,
                timestamp_ns=now_ns(),
            ))

        if result.written and not self._quiet:
            print(
                f"[burrow] {len(result.table)} routes -> {result.output_path} "
                f"({result.duration_ms:.0f}ms)",
                file=sys.stderr,
            )
        return result

    def _file_changed(
        self,
        path: Path,
        kind: Literal["added", "removed"],
    ) -> GenerateResult | None:
        config = self._require_config()
        if not is_page_file(path, config.pages_path):
            return None

        self._log.append(PageFileChanged(path=str(path), kind=kind, timestamp_ns=now_ns()))
        if not self._quiet:
            print(f"[burrow] Page {kind}, regenerating: {path}", file=sys.stderr)
        return self.regenerate(f"file_{kind}")

    def _require_config(self) -> BurrowConfig:
        if self._config is None:
            msg = "RouteIntegration used before config_done()"
            raise ConfigError(msg)
        return self._config
