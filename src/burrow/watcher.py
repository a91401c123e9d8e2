"""Page watcher — regenerates route declarations as pages come and go.

Runs watchfiles over the project root in a background thread and forwards
page-file additions and removals to a :class:`RouteIntegration`.  Edits to
existing pages do not change the route table and are ignored.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from watchfiles import Change, watch

from burrow._errors import ConfigError
from burrow.pages.scanner import is_page_file

if TYPE_CHECKING:
    from burrow.config import BurrowConfig
    from burrow.integration import RouteIntegration

# Mapping from watchfiles Change enum to the integration hook to call.
_CHANGE_KIND_MAP: dict[Change, Literal["added", "removed"]] = {
    Change.added: "added",
    Change.deleted: "removed",
}


def classify_change(
    change: Change,
    path: Path,
    config: BurrowConfig,
) -> Literal["added", "removed"] | None:
    """Return how a raw watchfiles change affects the route table.

    Returns None for modifications and for files that are not pages.

    """
    kind = _CHANGE_KIND_MAP.get(change)
    if kind is None:
        return None
    if not is_page_file(path, config.pages_path):
        return None
    return kind


class PageWatcher:
    """Watches the pages directory and drives integration hooks.

    The integration must have received ``config_done`` before ``start``.

    """

    def __init__(self, integration: RouteIntegration) -> None:
        self._integration = integration
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Whether the watcher background thread is active."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start watching for page changes in a background thread."""
        if self.is_running:
            return
        config = self._integration.config
        if config is None:
            msg = "PageWatcher started before config_done()"
            raise ConfigError(msg)

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._watch_loop,
            args=(config,),
            name="burrow-watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Signal the watcher to stop and wait for the thread to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

    def wait(self) -> None:
        """Block until the watcher stops."""
        while self.is_running:
            self._stop_event.wait(timeout=0.5)

    def _watch_loop(self, config: BurrowConfig) -> None:
        """Background thread: run watchfiles and dispatch page changes."""
        for raw_changes in watch(
            config.root,
            stop_event=self._stop_event,
            debounce=300,
            step=100,
        ):
            for change_type, path_str in sorted(raw_changes):
                path = Path(path_str)
                kind = classify_change(change_type, path, config)
                if kind == "added":
                    self._integration.file_added(path)
                elif kind == "removed":
                    self._integration.file_removed(path)
