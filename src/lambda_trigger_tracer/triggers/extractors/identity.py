from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lambda_trigger_tracer.events.model import Event

from .base import ExtractionContext, generate_id


def extract_cognito(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    """Cognito user pool trigger; the trigger source names the lifecycle hook."""

    event.id = generate_id("cognito")
    event.resource.name = payload["userPoolId"]
    event.resource.operation = payload["triggerSource"]
    ctx.add_to_metadata(
        event,
        {
            "username": payload.get("userName"),
            "region": payload.get("region"),
        },
        {
            "caller_context": payload.get("callerContext"),
            "request": payload.get("request"),
            "response": payload.get("response"),
        },
    )
