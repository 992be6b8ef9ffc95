"""Deterministic hashing of DynamoDB stream items.

Stream records carry items in the attribute-value encoding
(`{"id": {"S": "abc"}}`). Decoding that encoding is delegated to an
`ItemDecoder`. The default decoder uses boto3 when it is installed; without it
the item hash is the empty string.
"""

from __future__ import annotations

import base64
import hashlib
import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Protocol

logger = logging.getLogger(__name__)

REMOVE_EVENT = "REMOVE"


class ItemDecoder(Protocol):
    @property
    def available(self) -> bool: ...

    def unmarshall(self, image: Mapping[str, Any]) -> dict[str, Any]: ...


class NullItemDecoder:
    """Decoder used when no decoding backend is installed."""

    @property
    def available(self) -> bool:
        return False

    def unmarshall(self, image: Mapping[str, Any]) -> dict[str, Any]:
        return {}


class BotoItemDecoder:
    """Decode attribute values with boto3's `TypeDeserializer`."""

    def __init__(self) -> None:
        try:
            from boto3.dynamodb.types import TypeDeserializer
        except ImportError:
            logger.debug("boto3 is not installed; DynamoDB item hashes will be empty")
            self._deserializer = None
        else:
            self._deserializer = TypeDeserializer()

    @property
    def available(self) -> bool:
        return self._deserializer is not None

    def unmarshall(self, image: Mapping[str, Any]) -> dict[str, Any]:
        if self._deserializer is None:
            return {}
        return {key: self._deserializer.deserialize(value) for key, value in image.items()}


def default_item_decoder() -> ItemDecoder:
    decoder = BotoItemDecoder()
    return decoder if decoder.available else NullItemDecoder()


def _canonical_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=canonical_json)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    # boto3 wraps binary attributes in `Binary`, which exposes `.value`.
    raw = getattr(value, "value", None)
    if isinstance(raw, (bytes, bytearray)):
        return base64.b64encode(bytes(raw)).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def canonical_json(item: Any) -> str:
    """Compact JSON with keys sorted at every level."""

    return json.dumps(
        item,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_canonical_default,
    )


def item_hash(record: Mapping[str, Any], decoder: ItemDecoder) -> str:
    """md5 of the decoded item of a stream record.

    A REMOVE event only carries keys reliably, so only the keys are hashed.
    Every other event hashes the full new image.
    """

    if not decoder.available:
        return ""

    stream = record["dynamodb"]
    if record.get("eventName") == REMOVE_EVENT:
        image = stream.get("Keys") or {}
    else:
        image = stream.get("NewImage") or stream.get("Keys") or {}

    item = decoder.unmarshall(image)
    return hashlib.md5(canonical_json(item).encode("utf-8")).hexdigest()
