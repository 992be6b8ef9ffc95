from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from lambda_trigger_tracer.events.model import Event

from .base import ExtractionContext, as_text

S3_REQUEST_ID_HEADER = "x-amz-request-id"


def extract_s3(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    record = payload["Records"][0]
    request_id = record["responseElements"][S3_REQUEST_ID_HEADER]
    s3 = record["s3"]
    s3_object = s3.get("object") or {}

    event.id = request_id
    event.resource.name = s3["bucket"]["name"]
    event.resource.operation = record["eventName"]
    ctx.add_to_metadata(
        event,
        {
            "region": as_text(record.get("awsRegion")),
            "request_parameters": json.dumps(record.get("requestParameters")),
            "user_identity": json.dumps(record.get("userIdentity")),
            "object_key": as_text(s3_object.get("key")),
            "object_size": as_text(s3_object.get("size")),
            "object_etag": as_text(s3_object.get("eTag")),
            S3_REQUEST_ID_HEADER: as_text(request_id),
        },
    )
