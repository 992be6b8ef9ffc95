"""Extractors for stream sources (Kinesis and DynamoDB streams).

Both deliver batches; the first record identifies the trigger and the batch
size is recorded as `total_record_count`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from lambda_trigger_tracer.events.model import Event

from ..dynamodb_items import item_hash
from .base import ExtractionContext

KINESIS_EVENT_PREFIX = "aws:kinesis:"


def extract_kinesis(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    records = payload["Records"]
    record = records[0]
    kinesis = record.get("kinesis") or {}

    event.id = record["eventID"]
    event.resource.name = record["eventSourceARN"].split("/")[-1]
    event.resource.operation = record["eventName"].removeprefix(KINESIS_EVENT_PREFIX)
    ctx.add_to_metadata(
        event,
        {
            "region": record.get("awsRegion"),
            "invoke_identity": record.get("invokeIdentityArn"),
            "sequence_number": kinesis.get("sequenceNumber"),
            "partition_key": kinesis.get("partitionKey"),
            "total_record_count": len(records),
        },
    )


def extract_dynamodb(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    """DynamoDB stream batch.

    The table name is the second segment of the stream ARN
    (`arn:...:table/<name>/stream/<label>`).
    """

    records = payload["Records"]
    record = records[0]

    event.id = record["eventID"]
    event.resource.name = record["eventSourceARN"].split("/")[1]
    event.resource.operation = record["eventName"]
    ctx.add_to_metadata(
        event,
        {
            "region": record.get("awsRegion"),
            "sequence_number": record["dynamodb"].get("SequenceNumber"),
            "item_hash": item_hash(record, ctx.item_decoder),
            "total_record_count": len(records),
        },
        {"data": json.dumps(records)},
    )
