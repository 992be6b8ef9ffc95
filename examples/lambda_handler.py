#!/usr/bin/env python3
"""Trigger extraction inside a Lambda handler.

The builder is created once per container and reused for every invocation.
Extraction failures are isolated so tracing never breaks the handler.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from lambda_trigger_tracer.config import TracerSettings
from lambda_trigger_tracer.events import LoggingSink
from lambda_trigger_tracer.triggers import TriggerBuilder, TriggerExtractionError

settings = TracerSettings()
settings.setup_logging()

builder = TriggerBuilder(settings)
sink = LoggingSink()
logger = logging.getLogger(__name__)


def handler(event: Any, context: Any) -> dict[str, Any]:
    try:
        sink.emit(builder.build(event, context))
    except TriggerExtractionError:
        # The trigger is lost, the invocation is not.
        logger.exception("Could not build trigger")

    return {"statusCode": 200, "body": json.dumps({"ok": True})}
