"""Shared plumbing for per-source extractors.

An extractor fills the id, resource name, resource operation and metadata of a
blank event shell from one recognized payload shape. Fields that identify the
trigger are indexed directly: if they are missing the payload was classified
wrongly, and the resulting error is left to propagate. Optional fields are read
with `.get` and end up as `None` when absent.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from lambda_trigger_tracer.events.model import Event
from lambda_trigger_tracer.metadata import MetadataPolicy, add_to_metadata

from ..dynamodb_items import ItemDecoder, NullItemDecoder


@dataclass(frozen=True, slots=True)
class ExtractionContext:
    """Per-invocation inputs an extractor may need besides the payload."""

    function_name: str
    policy: MetadataPolicy = MetadataPolicy()
    item_decoder: ItemDecoder = NullItemDecoder()

    def add_to_metadata(
        self,
        event: Event,
        annotations: Mapping[str, Any],
        payload: Mapping[str, Any] | None = None,
    ) -> None:
        add_to_metadata(event, annotations, payload, policy=self.policy)


Extractor = Callable[[Mapping[str, Any], Event, ExtractionContext], None]


def generate_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4()}"


def as_text(value: Any) -> str:
    return "" if value is None else str(value)


def mapping(value: Any) -> Mapping[str, Any]:
    """`value` if it is a mapping, else an empty one (headers can be null)."""

    return value if isinstance(value, Mapping) else {}


def host_header(headers: Mapping[str, Any]) -> str | None:
    return headers.get("Host") or headers.get("host")
