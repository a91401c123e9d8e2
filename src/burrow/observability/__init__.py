"""Observability — structured events for route generation.

Quick Start:
    >>> from burrow.observability import EventLog, RoutesGenerated
    >>> log = EventLog()
    >>> integration = RouteIntegration(log=log)
    >>> log.query(event_type=RoutesGenerated)

"""

from burrow.observability.events import (
    GenerationFailed,
    PageFileChanged,
    RouteEvent,
    RoutesGenerated,
    now_ns,
)
from burrow.observability.log import EventLog

__all__ = [
    "EventLog",
    "GenerationFailed",
    "PageFileChanged",
    "RouteEvent",
    "RoutesGenerated",
    "now_ns",
]
