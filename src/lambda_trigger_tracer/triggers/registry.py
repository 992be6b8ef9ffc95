"""Source tag -> extractor dispatch table.

Every `SourceTag` must have exactly one extractor. The table is checked when
this module is imported, so a tag added to the enum without an extractor fails
loudly instead of at the first matching invocation.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .extractors import (
    Extractor,
    extract_api_gateway,
    extract_api_gateway_http2,
    extract_api_gateway_no_proxy,
    extract_api_gateway_websocket,
    extract_cognito,
    extract_dynamodb,
    extract_elastic_load_balancer,
    extract_events,
    extract_json,
    extract_kinesis,
    extract_s3,
    extract_sns,
    extract_sqs,
)
from .source_types import SourceTag


class UnknownSourceTagError(KeyError):
    pass


EXTRACTORS: Mapping[SourceTag, Extractor] = MappingProxyType(
    {
        SourceTag.JSON: extract_json,
        SourceTag.S3: extract_s3,
        SourceTag.KINESIS: extract_kinesis,
        SourceTag.EVENTS: extract_events,
        SourceTag.SNS: extract_sns,
        SourceTag.SQS: extract_sqs,
        SourceTag.API_GATEWAY: extract_api_gateway,
        SourceTag.API_GATEWAY_NO_PROXY: extract_api_gateway_no_proxy,
        SourceTag.API_GATEWAY_WEBSOCKET: extract_api_gateway_websocket,
        SourceTag.API_GATEWAY_HTTP2: extract_api_gateway_http2,
        SourceTag.DYNAMODB: extract_dynamodb,
        SourceTag.ELASTIC_LOAD_BALANCER: extract_elastic_load_balancer,
        SourceTag.COGNITO: extract_cognito,
    }
)


def _check_exhaustive() -> None:
    missing = set(SourceTag) - set(EXTRACTORS)
    if missing:
        names = ", ".join(sorted(tag.value for tag in missing))
        raise RuntimeError(f"No extractor registered for: {names}")


_check_exhaustive()


def get_extractor(tag: SourceTag) -> Extractor:
    try:
        return EXTRACTORS[tag]
    except KeyError:
        raise UnknownSourceTagError(f"Unknown trigger source: {tag!r}") from None
