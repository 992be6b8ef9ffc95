"""Metadata normalization.

Every producer attaches metadata through `add_to_metadata`, so the size and
redaction policy is applied in one place:

- annotations are always attached as given
- payload strings longer than the policy maximum are truncated with a marker
- in metadata-only mode the payload channel is dropped entirely
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from lambda_trigger_tracer.events.model import Event

DEFAULT_MAX_PAYLOAD_LENGTH = 1024
TRUNCATION_MARKER = "...(truncated)"


@dataclass(frozen=True, slots=True)
class MetadataPolicy:
    metadata_only: bool = False
    max_payload_length: int = DEFAULT_MAX_PAYLOAD_LENGTH

    def __post_init__(self) -> None:
        if self.max_payload_length <= 0:
            raise ValueError("max_payload_length must be positive")


def truncate_message(message: str, max_length: int = DEFAULT_MAX_PAYLOAD_LENGTH) -> str:
    """Cut `message` down to `max_length` characters and append the marker."""

    if len(message) <= max_length:
        return message
    return f"{message[:max_length]}{TRUNCATION_MARKER}"


def _normalize_payload_value(value: Any, policy: MetadataPolicy) -> Any:
    if isinstance(value, str):
        return truncate_message(value, policy.max_payload_length)
    return value


def add_to_metadata(
    event: Event,
    annotations: Mapping[str, Any],
    payload: Mapping[str, Any] | None = None,
    *,
    policy: MetadataPolicy | None = None,
) -> None:
    """Attach metadata to an event shell.

    Keys are unique per channel: attaching an existing key replaces its value.
    """

    policy = policy or MetadataPolicy()
    metadata = event.resource.metadata
    metadata.annotations.update(annotations)

    if not payload or policy.metadata_only:
        return

    for key, value in payload.items():
        metadata.payload[key] = _normalize_payload_value(value, policy)
