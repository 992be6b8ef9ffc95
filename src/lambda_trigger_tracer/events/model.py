"""Trace event records.

An `Event` is the mutable shell that extractors and other producers fill in.
Once filled it is sealed into a `TraceEvent`, which is frozen and handed to the
transport layer unchanged.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

TRIGGER_ORIGIN = "trigger"


def freeze(value: Any) -> Any:
    """Read-only deep copy of a JSON-like value.

    Mappings become `MappingProxyType`, lists and tuples become tuples, sets
    become frozensets. Scalars are returned as they are.
    """

    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Plain dicts and lists again, for the transport layer."""

    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (tuple, frozenset)):
        return [thaw(item) for item in value]
    return value


class ErrorCode(str, Enum):
    OK = "ok"
    ERROR = "error"
    EXCEPTION = "exception"
    TIMEOUT = "timeout"


@dataclass(slots=True)
class Metadata:
    """The two metadata channels of an event.

    `annotations` are small searchable values and are never capped or redacted.
    `payload` holds larger blobs and is subject to the metadata policy.
    """

    annotations: dict[str, Any] = field(default_factory=dict)
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Resource:
    type: str = ""
    name: str = ""
    operation: str = ""
    metadata: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True, slots=True)
class ExceptionInfo:
    type: str
    message: str
    traceback: str = ""

    def to_json(self) -> dict[str, object]:
        return {"type": self.type, "message": self.message, "traceback": self.traceback}


@dataclass(slots=True)
class Event:
    """An event while it is being built."""

    id: str = ""
    resource: Resource = field(default_factory=Resource)
    origin: str = ""
    start_time: float = 0.0
    duration: float = 0.0
    error_code: ErrorCode = ErrorCode.OK
    exception: ExceptionInfo | None = None

    def seal(self) -> TraceEvent:
        """Freeze this shell into a finished record.

        Metadata is frozen all the way down, so neither later changes to the
        shell nor changes to the invocation payload leak into the record.
        """

        return TraceEvent(
            id=self.id,
            resource_type=self.resource.type,
            resource_name=self.resource.name,
            resource_operation=self.resource.operation,
            origin=self.origin,
            start_time=self.start_time,
            duration=self.duration,
            error_code=self.error_code,
            annotations=freeze(self.resource.metadata.annotations),
            payload=freeze(self.resource.metadata.payload),
            exception=self.exception,
        )


@dataclass(frozen=True, slots=True)
class TraceEvent:
    """A finished, immutable trace event."""

    id: str
    resource_type: str
    resource_name: str
    resource_operation: str
    origin: str
    start_time: float
    duration: float
    error_code: ErrorCode
    annotations: Mapping[str, Any]
    payload: Mapping[str, Any]
    exception: ExceptionInfo | None = None

    @property
    def is_trigger(self) -> bool:
        return self.origin == TRIGGER_ORIGIN

    def with_duration(self, duration: float) -> TraceEvent:
        """Return a copy with the duration attached."""

        return dataclasses.replace(self, duration=duration)

    def to_json(self) -> dict[str, object]:
        out: dict[str, object] = {
            "id": self.id,
            "origin": self.origin,
            "start_time": self.start_time,
            "duration": self.duration,
            "error_code": self.error_code.value,
            "resource": {
                "type": self.resource_type,
                "name": self.resource_name,
                "operation": self.resource_operation,
                "metadata": {
                    "annotations": thaw(self.annotations),
                    "payload": thaw(self.payload),
                },
            },
        }
        if self.exception is not None:
            out["exception"] = self.exception.to_json()
        return out
