from __future__ import annotations

from typing import Any

from lambda_trigger_tracer.events.model import Event

from .base import ExtractionContext, generate_id


def extract_json(payload: Any, event: Event, ctx: ExtractionContext) -> None:
    """Direct invocation: the whole payload is the data."""

    event.id = generate_id("trigger")
    event.resource.name = f"trigger-{ctx.function_name}"
    event.resource.operation = "Event"
    ctx.add_to_metadata(event, {}, {"data": payload})
