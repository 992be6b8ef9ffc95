"""Test configuration and fixtures.

Payload fixtures are trimmed copies of real Lambda event shapes.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

import pytest

from lambda_trigger_tracer.config import TracerSettings


@dataclass(frozen=True)
class FakeLambdaContext:
    function_name: str = "orders-handler"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def settings() -> TracerSettings:
    """Settings that do not depend on the developer's environment."""
    return TracerSettings(_env_file=None, metadata_only=False, max_payload_length=1024)


@pytest.fixture
def metadata_only_settings() -> TracerSettings:
    return TracerSettings(_env_file=None, metadata_only=True, max_payload_length=1024)


S3_EVENT: dict[str, Any] = {
    "Records": [
        {
            "eventVersion": "2.1",
            "eventSource": "aws:s3",
            "awsRegion": "us-east-1",
            "eventName": "ObjectCreated:Put",
            "userIdentity": {"principalId": "AWS:AIDAEXAMPLE"},
            "requestParameters": {"sourceIPAddress": "10.0.0.1"},
            "responseElements": {
                "x-amz-request-id": "C3D13FE58DE4C810",
                "x-amz-id-2": "FMyUVURIY8/IgAtTv8xRjskZQpcIZ9KG4V5Wp6S7S/JRWeUWerMUE5JgHvANOjpD",
            },
            "s3": {
                "bucket": {"name": "orders-bucket", "arn": "arn:aws:s3:::orders-bucket"},
                "object": {"key": "2024/order.json", "size": 1024, "eTag": "d41d8cd98f00b204"},
            },
        }
    ]
}

KINESIS_EVENT: dict[str, Any] = {
    "Records": [
        {
            "kinesis": {
                "partitionKey": "partition-1",
                "sequenceNumber": "49590338271490256608559692538361571095921575989136588898",
                "data": "SGVsbG8sIHRoaXMgaXMgYSB0ZXN0Lg==",
            },
            "eventSource": "aws:kinesis",
            "eventID": "shardId-000000000006:49590338271490256608559692538361571095921575989136588898",
            "invokeIdentityArn": "arn:aws:iam::123456789012:role/lambda-role",
            "eventName": "aws:kinesis:record",
            "eventSourceARN": "arn:aws:kinesis:us-east-1:123456789012:stream/click-stream",
            "awsRegion": "us-east-1",
        },
        {
            "kinesis": {"partitionKey": "partition-2", "sequenceNumber": "2"},
            "eventSource": "aws:kinesis",
            "eventID": "shardId-000000000006:2",
            "eventName": "aws:kinesis:record",
            "eventSourceARN": "arn:aws:kinesis:us-east-1:123456789012:stream/click-stream",
            "awsRegion": "us-east-1",
        },
    ]
}

SNS_EVENT: dict[str, Any] = {
    "Records": [
        {
            "EventSource": "aws:sns",
            "EventVersion": "1.0",
            "EventSubscriptionArn": "arn:aws:sns:us-east-1:123456789012:order-topic:2bcfbf39-05c3",
            "Sns": {
                "Type": "Notification",
                "MessageId": "95df01b4-ee98-5cb9-9903-4c221d41eb5e",
                "TopicArn": "arn:aws:sns:us-east-1:123456789012:order-topic",
                "Subject": "New order",
                "Message": "order 42 created",
                "MessageAttributes": {"priority": {"Type": "String", "Value": "high"}},
            },
        }
    ]
}

SQS_EVENT: dict[str, Any] = {
    "Records": [
        {
            "messageId": "059f36b4-87a3-44ab-83d2-661975830a7d",
            "receiptHandle": "AQEBwJnKyrHigUMZj6rYigCgxlaS3SLy0a",
            "body": "Test message.",
            "attributes": {"ApproximateReceiveCount": "1", "SenderId": "AIDAIENQZJOLO23YVJ4VO"},
            "messageAttributes": {},
            "md5OfBody": "e4e68fb7bd0e697a0ae8f1bb342846b3",
            "eventSource": "aws:sqs",
            "eventSourceARN": "arn:aws:sqs:us-east-2:123456789012:orders-queue",
            "awsRegion": "us-east-2",
        },
        {
            "messageId": "2e1424d4-f796-459a-8184-9c92662be6da",
            "body": "Second message.",
            "attributes": {"ApproximateReceiveCount": "1"},
            "messageAttributes": {},
            "md5OfBody": "a3ff0b1b3b2f3f0e7b5ccd3d3bd50dc5",
            "eventSource": "aws:sqs",
            "eventSourceARN": "arn:aws:sqs:us-east-2:123456789012:orders-queue",
            "awsRegion": "us-east-2",
        },
    ]
}

API_GATEWAY_EVENT: dict[str, Any] = {
    "resource": "/orders/{id}",
    "path": "/orders/42",
    "httpMethod": "GET",
    "headers": {"Host": "abc123.execute-api.us-east-1.amazonaws.com", "Accept": "*/*"},
    "queryStringParameters": {"verbose": "1"},
    "pathParameters": {"id": "42"},
    "requestContext": {
        "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
        "apiId": "abc123",
        "stage": "prod",
    },
    "body": None,
}

API_GATEWAY_HTTP2_EVENT: dict[str, Any] = {
    "version": "2.0",
    "routeKey": "POST /orders",
    "rawPath": "/orders",
    "headers": {"content-type": "application/json"},
    "queryStringParameters": {"dry_run": "true"},
    "requestContext": {
        "apiId": "xyz789",
        "domainName": "xyz789.execute-api.us-east-1.amazonaws.com",
        "http": {"method": "POST", "path": "/orders", "protocol": "HTTP/1.1"},
        "requestId": "JKJaXmPLvHcESHA=",
        "stage": "$default",
    },
    "body": '{"item": "book"}',
}

API_GATEWAY_NO_PROXY_EVENT: dict[str, Any] = {
    "body-json": {"item": "book"},
    "params": {
        "path": {"id": "42"},
        "querystring": {"verbose": "1"},
        "header": {"Host": "legacy.example.com"},
    },
    "context": {
        "api-id": "legacy123",
        "http-method": "PUT",
        "request-id": "2b9c5e6c-0a8d-4b1c-9a4a-2d0c5e6f7a8b",
        "resource-path": "/orders/{id}",
        "stage": "dev",
    },
}

API_GATEWAY_WEBSOCKET_EVENT: dict[str, Any] = {
    "requestContext": {
        "routeKey": "$default",
        "messageId": "GXLKJfX4FiACG1w=",
        "eventType": "MESSAGE",
        "messageDirection": "IN",
        "connectionId": "GXLKAfX1FiACF-w=",
        "apiId": "ws123",
        "requestId": "GXLKJE2AFiAFbEw=",
        "domainName": "ws123.execute-api.us-east-1.amazonaws.com",
        "stage": "production",
    },
    "body": '{"action": "ping"}',
}

EVENTS_EVENT: dict[str, Any] = {
    "version": "0",
    "id": "53dc4d37-cffa-4f76-80c9-8b7d4a4d2eaa",
    "detail-type": "Scheduled Event",
    "source": "aws.events",
    "account": "123456789012",
    "time": "2024-10-08T16:53:06Z",
    "region": "us-east-1",
    "resources": ["arn:aws:events:us-east-1:123456789012:rule/nightly-report"],
    "detail": {"job": "report"},
}

DYNAMODB_EVENT: dict[str, Any] = {
    "Records": [
        {
            "eventID": "c4ca4238a0b923820dcc509a6f75849b",
            "eventName": "INSERT",
            "eventVersion": "1.1",
            "eventSource": "aws:dynamodb",
            "awsRegion": "us-east-1",
            "dynamodb": {
                "Keys": {"Id": {"N": "101"}},
                "NewImage": {"Message": {"S": "New item!"}, "Id": {"N": "101"}},
                "SequenceNumber": "111",
                "SizeBytes": 26,
                "StreamViewType": "NEW_AND_OLD_IMAGES",
            },
            "eventSourceARN": (
                "arn:aws:dynamodb:us-east-1:123456789012:table/Orders/stream/2015-06-27T00:48:05.899"
            ),
        }
    ]
}

ELB_EVENT: dict[str, Any] = {
    "requestContext": {
        "elb": {
            "targetGroupArn": (
                "arn:aws:elasticloadbalancing:us-east-1:123456789012:targetgroup/orders-tg/6d0ecf831eec9f09"
            )
        }
    },
    "httpMethod": "GET",
    "path": "/health",
    "queryStringParameters": {"deep": "1"},
    "headers": {"host": "orders-alb-123.us-east-1.elb.amazonaws.com", "user-agent": "curl/8.0"},
    "body": "",
    "isBase64Encoded": False,
}

COGNITO_EVENT: dict[str, Any] = {
    "version": "1",
    "region": "us-east-1",
    "userPoolId": "us-east-1_EXAMPLE",
    "userName": "jdoe",
    "callerContext": {"awsSdkVersion": "aws-sdk-unknown-unknown", "clientId": "client-1"},
    "triggerSource": "PreSignUp_SignUp",
    "request": {"userAttributes": {"email": "jdoe@example.com"}},
    "response": {"autoConfirmUser": False},
}


@pytest.fixture
def s3_event() -> dict[str, Any]:
    return copy.deepcopy(S3_EVENT)


@pytest.fixture
def kinesis_event() -> dict[str, Any]:
    return copy.deepcopy(KINESIS_EVENT)


@pytest.fixture
def sns_event() -> dict[str, Any]:
    return copy.deepcopy(SNS_EVENT)


@pytest.fixture
def sqs_event() -> dict[str, Any]:
    return copy.deepcopy(SQS_EVENT)


@pytest.fixture
def api_gateway_event() -> dict[str, Any]:
    return copy.deepcopy(API_GATEWAY_EVENT)


@pytest.fixture
def api_gateway_http2_event() -> dict[str, Any]:
    return copy.deepcopy(API_GATEWAY_HTTP2_EVENT)


@pytest.fixture
def api_gateway_no_proxy_event() -> dict[str, Any]:
    return copy.deepcopy(API_GATEWAY_NO_PROXY_EVENT)


@pytest.fixture
def api_gateway_websocket_event() -> dict[str, Any]:
    return copy.deepcopy(API_GATEWAY_WEBSOCKET_EVENT)


@pytest.fixture
def cloudwatch_event() -> dict[str, Any]:
    return copy.deepcopy(EVENTS_EVENT)


@pytest.fixture
def dynamodb_event() -> dict[str, Any]:
    return copy.deepcopy(DYNAMODB_EVENT)


@pytest.fixture
def elb_event() -> dict[str, Any]:
    return copy.deepcopy(ELB_EVENT)


@pytest.fixture
def cognito_event() -> dict[str, Any]:
    return copy.deepcopy(COGNITO_EVENT)
