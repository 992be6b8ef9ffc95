"""Primitives shared by every event producer.

Trigger extraction uses these, and so can any other instrumentation source
(for example a file-system hook) that wants to emit its own events without the
trigger machinery.
"""

from __future__ import annotations

import time
import traceback

from .model import ErrorCode, Event, ExceptionInfo, Resource, TraceEvent


def now() -> float:
    """Current capture time in epoch seconds."""

    return time.time()


def initialize_event(
    resource_type: str, name: str, operation: str, origin: str
) -> tuple[Event, float]:
    """Create a minimal event shell and return it with its start time."""

    start_time = now()
    event = Event(
        resource=Resource(type=resource_type, name=name, operation=operation),
        origin=origin,
        start_time=start_time,
        error_code=ErrorCode.OK,
    )
    return event, start_time


def set_exception(event: Event, error: BaseException) -> None:
    event.error_code = ErrorCode.EXCEPTION
    event.exception = ExceptionInfo(
        type=type(error).__name__,
        message=str(error),
        traceback="".join(traceback.format_exception(error)),
    )


def finalize_event(
    event: Event, start_time: float, error: BaseException | None = None
) -> TraceEvent:
    """Record the duration, and the error if any, then seal the event."""

    event.duration = now() - start_time
    if error is not None:
        set_exception(event, error)
    return event.seal()
