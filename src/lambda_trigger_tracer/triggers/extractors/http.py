"""Extractors for HTTP-fronted invocations.

API Gateway comes in four shapes (REST proxy, REST without proxy integration,
HTTP API v2 and WebSocket); the Application Load Balancer has its own.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from lambda_trigger_tracer.events.model import Event

from .base import ExtractionContext, as_text, generate_id, host_header, mapping

DEFAULT_WEBSOCKET_EVENT_TYPE = "CONNECT"


def extract_api_gateway(payload: Mapping[str, Any], event: Event, ctx: ExtractionContext) -> None:
    request_context = payload["requestContext"]
    headers = mapping(payload.get("headers"))

    event.id = request_context["requestId"]
    event.resource.name = as_text(host_header(headers) or request_context.get("apiId"))
    event.resource.operation = payload["httpMethod"]
    ctx.add_to_metadata(
        event,
        {
            "stage": request_context.get("stage"),
            "query_string_parameters": payload.get("queryStringParameters"),
            "path_parameters": payload.get("pathParameters"),
            "path": payload.get("resource"),
        },
        {
            "body": payload.get("body"),
            "headers": payload.get("headers"),
            "requestContext": request_context,
        },
    )


def extract_api_gateway_http2(
    payload: Mapping[str, Any], event: Event, ctx: ExtractionContext
) -> None:
    request_context = payload["requestContext"]
    http = request_context["http"]
    headers = mapping(payload.get("headers"))

    event.id = request_context["requestId"]
    event.resource.name = as_text(host_header(headers) or request_context.get("domainName"))
    event.resource.operation = http["method"]
    ctx.add_to_metadata(
        event,
        {
            "stage": request_context.get("stage"),
            "query_string_parameters": payload.get("queryStringParameters"),
            "path_parameters": payload.get("pathParameters"),
            "path": http.get("path"),
            "aws.api_gateway.api_id": request_context["apiId"],
        },
        {
            "body": payload.get("body"),
            "headers": payload.get("headers"),
            "requestContext": request_context,
        },
    )


def extract_api_gateway_no_proxy(
    payload: Mapping[str, Any], event: Event, ctx: ExtractionContext
) -> None:
    """Non-proxy integration: the mapping template puts request data under
    `context` and `params` instead of the top level."""

    context = payload["context"]
    params = mapping(payload.get("params"))
    headers = mapping(params.get("header"))

    event.id = context["request-id"]
    event.resource.name = as_text(host_header(headers) or context.get("api-id"))
    event.resource.operation = context["http-method"]
    ctx.add_to_metadata(
        event,
        {
            "stage": context.get("stage"),
            "query_string_parameters": params.get("querystring"),
            "path_parameters": params.get("path"),
            "path": context.get("resource-path"),
        },
        {
            "body": payload.get("body-json"),
            "headers": params.get("header"),
        },
    )


def extract_api_gateway_websocket(
    payload: Mapping[str, Any], event: Event, ctx: ExtractionContext
) -> None:
    request_context = payload["requestContext"]

    event.id = request_context["requestId"]
    event.resource.name = as_text(request_context.get("domainName"))
    event.resource.operation = request_context.get("eventType") or DEFAULT_WEBSOCKET_EVENT_TYPE
    ctx.add_to_metadata(
        event,
        {
            "stage": request_context.get("stage"),
            "route_key": request_context.get("routeKey"),
            "message_id": request_context.get("messageId"),
            "connection_id": request_context.get("connectionId"),
            "request_id": request_context["requestId"],
            "message_direction": request_context.get("messageDirection"),
        },
        {"body": payload.get("body")},
    )


def extract_elastic_load_balancer(
    payload: Mapping[str, Any], event: Event, ctx: ExtractionContext
) -> None:
    headers = payload["headers"]

    event.id = generate_id("elb")
    event.resource.name = headers["host"]
    event.resource.operation = payload["httpMethod"]
    ctx.add_to_metadata(
        event,
        {
            "query_string_parameters": json.dumps(payload.get("queryStringParameters")),
            "target_group_arn": payload["requestContext"]["elb"].get("targetGroupArn"),
            "path": payload.get("path"),
        },
        {
            "body": json.dumps(payload.get("body")),
            "headers": json.dumps(headers),
        },
    )
