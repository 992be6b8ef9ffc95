"""Extractors for messaging sources: SNS, SQS and CloudWatch/EventBridge events."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from lambda_trigger_tracer.events.model import Event
from lambda_trigger_tracer.metadata import truncate_message

from ..sqs_utils import get_sns_trigger, get_steps_dict
from .base import ExtractionContext

SQS_OPERATION = "ReceiveMessage"
EMPTY_SQS_BODY = "{}"
DEFAULT_EVENTS_NAME = "CloudWatch Events"


def extract_sns(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    record = payload["Records"][0]
    sns = record["Sns"]

    event.id = sns["MessageId"]
    event.resource.name = record["EventSubscriptionArn"].split(":")[-2]
    event.resource.operation = sns["Type"]
    ctx.add_to_metadata(
        event,
        {"Notification Subject": sns.get("Subject")},
        {
            "Notification Message": sns.get("Message"),
            "Notification Message Attributes": sns.get("MessageAttributes"),
        },
    )


def _sqs_record_metadata(record: Mapping[str, Any], ctx: ExtractionContext) -> dict[str, Any]:
    out: dict[str, Any] = {
        "MD5 Of Message Body": record.get("md5OfBody"),
        "Message ID": record.get("messageId"),
    }
    if not ctx.policy.metadata_only:
        out["Message Body"] = truncate_message(
            record.get("body") or EMPTY_SQS_BODY, ctx.policy.max_payload_length
        )
        out["Attributes"] = record.get("attributes")
        out["Message Attributes"] = record.get("messageAttributes")
    return out


def extract_sqs(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    """SQS batch.

    Besides the per-record summary, two kinds of metadata can be nested in the
    message bodies: step-functions context in the first body, and an SNS
    notification when the queue is subscribed to a topic.
    """

    records = payload["Records"]
    first = records[0]

    event.id = first["messageId"]
    event.resource.name = first["eventSourceARN"].split(":")[-1]
    event.resource.operation = SQS_OPERATION
    ctx.add_to_metadata(
        event,
        {
            "record": [_sqs_record_metadata(record, ctx) for record in records],
            "total_record_count": len(records),
        },
    )

    steps_dict = get_steps_dict(first.get("body") or EMPTY_SQS_BODY)
    if steps_dict is not None:
        ctx.add_to_metadata(event, {"steps_dict": steps_dict})

    sns_trigger = get_sns_trigger(records)
    if sns_trigger is not None:
        ctx.add_to_metadata(event, {"SNS Trigger": sns_trigger})


def extract_events(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    resources = payload.get("resources") or []
    name = DEFAULT_EVENTS_NAME
    if resources and isinstance(resources[0], str):
        name = resources[0].split("/")[-1]

    event.id = payload["id"]
    event.resource.name = name
    event.resource.operation = payload["detail-type"]
    ctx.add_to_metadata(
        event,
        {
            "region": payload.get("region"),
            "detail": json.dumps(payload.get("detail")),
            "account": payload.get("account"),
        },
    )
