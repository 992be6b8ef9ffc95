"""Hand-off boundary to the transport layer.

The tracer never sends events itself. It hands finished records to an
`EventSink`; the transport behind it is someone else's concern.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .model import TraceEvent

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    def emit(self, event: TraceEvent) -> None: ...


class CollectingSink:
    """Keeps emitted events in memory, in emission order."""

    def __init__(self) -> None:
        self._events: list[TraceEvent] = []

    @property
    def events(self) -> list[TraceEvent]:
        return list(self._events)

    def emit(self, event: TraceEvent) -> None:
        self._events.append(event)

    def clear(self) -> None:
        self._events.clear()


class LoggingSink:
    """Writes each event as a structured log line."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def emit(self, event: TraceEvent) -> None:
        logger.log(
            self._level,
            "Trace event",
            extra={"trace_event": event.to_json()},
        )
