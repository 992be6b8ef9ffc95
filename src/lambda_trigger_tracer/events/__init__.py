"""Trace event records and the primitives that produce them."""

from .lifecycle import finalize_event, initialize_event, set_exception
from .model import TRIGGER_ORIGIN, ErrorCode, Event, ExceptionInfo, Metadata, Resource, TraceEvent
from .sink import CollectingSink, EventSink, LoggingSink

__all__ = [
    "TRIGGER_ORIGIN",
    "CollectingSink",
    "ErrorCode",
    "Event",
    "EventSink",
    "ExceptionInfo",
    "LoggingSink",
    "Metadata",
    "Resource",
    "TraceEvent",
    "finalize_event",
    "initialize_event",
    "set_exception",
]
