"""Event model for route generation.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Watch events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PageFileChanged:
    """A page file was added to or removed from the pages directory.

    Attributes:
        path: Absolute path to the page file.
        kind: Type of filesystem change.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    kind: Literal["added", "removed"]
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Generation events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RoutesGenerated:
    """The pages directory was scanned and its declarations rendered.

    Attributes:
        path: Declarations file path.
        route_count: Number of routes in the table.
        written: False when the declarations were already up to date.
        trigger: Lifecycle hook that requested the generation.
        duration_ms: Time for scan, render, and write in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    route_count: int
    written: bool
    trigger: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class GenerationFailed:
    """Route generation was abandoned; the previous declarations remain.

    Attributes:
        trigger: Lifecycle hook that requested the generation.
        error: Error message shown to the user.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    trigger: str
    error: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type RouteEvent = PageFileChanged | RoutesGenerated | GenerationFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
