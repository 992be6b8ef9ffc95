"""Helpers for metadata nested inside SQS message bodies."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

STEP_FUNCTIONS_KEY = "Epsagon"

SNS_NOTIFICATION_FIELDS: tuple[str, ...] = (
    "Type",
    "MessageId",
    "TopicArn",
    "Message",
    "Timestamp",
    "SignatureVersion",
    "Signature",
)


def get_steps_dict(body: str) -> Any | None:
    """Return the step-functions metadata carried in a message body, if any.

    A body that is not JSON is not an error; it just carries no metadata.
    """

    try:
        message = json.loads(body)
    except (TypeError, ValueError):
        logger.debug("Could not parse SQS message body", extra={"body": body})
        return None

    if not isinstance(message, Mapping):
        return None
    step_input = message.get("input")
    if not isinstance(step_input, Mapping):
        return None
    return step_input.get(STEP_FUNCTIONS_KEY) or None


def _record_body(record: Mapping[str, Any]) -> str | None:
    if "Body" in record:
        return record["Body"]
    return record.get("body")


def get_sns_trigger(records: Sequence[Mapping[str, Any]]) -> dict[str, Any] | None:
    """Find the first SNS notification delivered through SQS.

    Scanning stops at the first record without a body.
    """

    for record in records:
        body = _record_body(record)
        if body is None:
            return None
        try:
            message = json.loads(body)
        except (TypeError, ValueError) as e:
            logger.debug("Could not parse SNS message from SQS message", extra={"error": str(e)})
            continue
        if isinstance(message, dict) and all(
            field in message for field in SNS_NOTIFICATION_FIELDS
        ):
            return message
    return None
