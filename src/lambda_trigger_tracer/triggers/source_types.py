from __future__ import annotations

from enum import Enum


class SourceTag(str, Enum):
    """The closed set of trigger sources a payload can be classified as."""

    JSON = "json"
    S3 = "s3"
    KINESIS = "kinesis"
    EVENTS = "events"
    SNS = "sns"
    SQS = "sqs"
    API_GATEWAY = "api_gateway"
    API_GATEWAY_NO_PROXY = "api_gateway_no_proxy"
    API_GATEWAY_WEBSOCKET = "api_gateway_websocket"
    API_GATEWAY_HTTP2 = "api_gateway_http2"
    DYNAMODB = "dynamodb"
    ELASTIC_LOAD_BALANCER = "elastic_load_balancer"
    COGNITO = "cognito"

    @classmethod
    def parse(cls, value: str) -> SourceTag | None:
        """Return the tag for `value`, or None if it is not a known source."""

        try:
            return cls(value)
        except ValueError:
            return None
