"""Per-source extractors, grouped by source family."""

from .base import ExtractionContext, Extractor
from .http import (
    extract_api_gateway,
    extract_api_gateway_http2,
    extract_api_gateway_no_proxy,
    extract_api_gateway_websocket,
    extract_elastic_load_balancer,
)
from .identity import extract_cognito
from .invoke import extract_json
from .messaging import extract_events, extract_sns, extract_sqs
from .storage import extract_s3
from .streams import extract_dynamodb, extract_kinesis

__all__ = [
    "ExtractionContext",
    "Extractor",
    "extract_api_gateway",
    "extract_api_gateway_http2",
    "extract_api_gateway_no_proxy",
    "extract_api_gateway_websocket",
    "extract_cognito",
    "extract_dynamodb",
    "extract_elastic_load_balancer",
    "extract_events",
    "extract_json",
    "extract_kinesis",
    "extract_s3",
    "extract_sns",
    "extract_sqs",
]
