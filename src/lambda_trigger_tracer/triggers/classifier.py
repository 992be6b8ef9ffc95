"""Classify an invocation payload into a trigger source.

Classification is an ordered list of rules evaluated top-down; the first rule
that matches decides the tag. Several rules can match the same payload, so the
order of `CLASSIFICATION_RULES` is part of the behavior. A load balancer
request carries `httpMethod` too, and must still resolve to
`elastic_load_balancer`.

Every rule treats missing or oddly typed fields as a non-match. `classify` is
total and never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .source_types import SourceTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """A named rule: returns the raw tag if the payload matches, else None."""

    name: str
    match: Callable[[Mapping[str, Any]], str | None]


def _first_record(payload: Mapping[str, Any]) -> Mapping[str, Any] | None:
    records = payload.get("Records")
    if not isinstance(records, list) or not records:
        return None
    first = records[0]
    return first if isinstance(first, Mapping) else None


def _nested(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


def _record_source(field_name: str) -> Callable[[Mapping[str, Any]], str | None]:
    def match(payload: Mapping[str, Any]) -> str | None:
        record = _first_record(payload)
        if record is None:
            return None
        source = record.get(field_name)
        if not isinstance(source, str):
            return None
        return source.rsplit(":", 1)[-1]

    return match


def _cloudwatch_event(payload: Mapping[str, Any]) -> str | None:
    if "source" in payload and "detail-type" in payload and "detail" in payload:
        return SourceTag.EVENTS.value
    return None


def _dotted_source(payload: Mapping[str, Any]) -> str | None:
    source = payload.get("source")
    if not isinstance(source, str) or not source:
        return None
    return source.rsplit(".", 1)[-1]


def _has(key: str, tag: SourceTag) -> Callable[[Mapping[str, Any]], str | None]:
    def match(payload: Mapping[str, Any]) -> str | None:
        return tag.value if key in payload else None

    return match


def _has_nested(
    parent: str, keys: tuple[str, ...], tag: SourceTag
) -> Callable[[Mapping[str, Any]], str | None]:
    def match(payload: Mapping[str, Any]) -> str | None:
        nested = _nested(payload, parent)
        return tag.value if all(key in nested for key in keys) else None

    return match


# Order matters. Do not reorder without updating the ordering tests.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("records_EventSource", _record_source("EventSource")),
    ClassificationRule("records_eventSource", _record_source("eventSource")),
    ClassificationRule("cloudwatch_event", _cloudwatch_event),
    ClassificationRule("dotted_source", _dotted_source),
    ClassificationRule(
        "load_balancer",
        _has_nested("requestContext", ("elb",), SourceTag.ELASTIC_LOAD_BALANCER),
    ),
    ClassificationRule("api_gateway", _has("httpMethod", SourceTag.API_GATEWAY)),
    ClassificationRule(
        "api_gateway_no_proxy",
        _has_nested("context", ("http-method",), SourceTag.API_GATEWAY_NO_PROXY),
    ),
    ClassificationRule("dynamodb", _has("dynamodb", SourceTag.DYNAMODB)),
    ClassificationRule("cognito", _has("userPoolId", SourceTag.COGNITO)),
    ClassificationRule(
        "api_gateway_http2",
        _has_nested("requestContext", ("apiId", "http"), SourceTag.API_GATEWAY_HTTP2),
    ),
    ClassificationRule(
        "api_gateway_websocket",
        _has_nested("requestContext", ("apiId",), SourceTag.API_GATEWAY_WEBSOCKET),
    ),
)


def classify(payload: Any) -> SourceTag:
    """Return the source tag for an invocation payload.

    Anything that is not a non-empty mapping, or that no rule matches, is
    classified as `SourceTag.JSON`. A rule that derives a tag outside the known
    sources (for example `aws.codecommit`) also falls back to `SourceTag.JSON`.
    """

    if not isinstance(payload, Mapping) or not payload:
        return SourceTag.JSON

    for rule in CLASSIFICATION_RULES:
        raw = rule.match(payload)
        if raw is None:
            continue
        tag = SourceTag.parse(raw)
        if tag is None:
            logger.debug(
                "Unknown trigger source, falling back to json",
                extra={"rule": rule.name, "source": raw},
            )
            return SourceTag.JSON
        return tag

    return SourceTag.JSON
