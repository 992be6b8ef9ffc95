"""Build the trigger record for an invocation.

The pipeline is linear: classify the payload, look up the extractor for the
tag, let it fill a blank event shell (metadata goes through the normalizer),
then fill the fields common to every trigger and seal the record.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from lambda_trigger_tracer.config import TracerSettings
from lambda_trigger_tracer.events.lifecycle import now
from lambda_trigger_tracer.events.model import TRIGGER_ORIGIN, ErrorCode, Event, TraceEvent
from lambda_trigger_tracer.metadata import MetadataPolicy

from .classifier import classify
from .dynamodb_items import ItemDecoder, default_item_decoder
from .extractors import ExtractionContext
from .registry import get_extractor
from .source_types import SourceTag

logger = logging.getLogger(__name__)


class InvocationContext(Protocol):
    """The part of the Lambda context object the builder reads."""

    @property
    def function_name(self) -> str: ...


class TriggerExtractionError(RuntimeError):
    """An extractor failed on a payload it was selected for.

    This points at a classification bug, not at bad user data, so it is not
    swallowed. Callers should isolate it from the host invocation.
    """

    def __init__(self, tag: SourceTag, cause: Exception) -> None:
        super().__init__(f"Failed to extract {tag.value} trigger: {cause!r}")
        self.tag = tag


def fill_common_fields(event: Event, tag: SourceTag) -> None:
    event.start_time = now()
    event.duration = 0.0
    event.origin = TRIGGER_ORIGIN
    event.resource.type = tag.value
    event.error_code = ErrorCode.OK


class TriggerBuilder:
    """Turns (payload, context) into a finished trigger record.

    Holds only configuration; one builder can serve any number of invocations.
    """

    def __init__(
        self,
        settings: TracerSettings | None = None,
        *,
        item_decoder: ItemDecoder | None = None,
    ) -> None:
        self._settings = settings or TracerSettings()
        self._policy = self._settings.metadata_policy
        self._item_decoder = item_decoder or default_item_decoder()

    @property
    def policy(self) -> MetadataPolicy:
        return self._policy

    def build(self, payload: Any, context: InvocationContext) -> TraceEvent:
        tag = classify(payload)
        logger.debug("Classified trigger", extra={"tag": tag.value})

        extractor = get_extractor(tag)
        event = Event()
        ctx = ExtractionContext(
            function_name=context.function_name,
            policy=self._policy,
            item_decoder=self._item_decoder,
        )
        try:
            extractor(payload, event, ctx)
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            raise TriggerExtractionError(tag, e) from e

        fill_common_fields(event, tag)
        return event.seal()


def create_from_event(
    payload: Any,
    context: InvocationContext,
    *,
    settings: TracerSettings | None = None,
    item_decoder: ItemDecoder | None = None,
) -> TraceEvent:
    """Build the trigger record for a single invocation."""

    return TriggerBuilder(settings, item_decoder=item_decoder).build(payload, context)


def safe_create_from_event(
    payload: Any,
    context: InvocationContext,
    *,
    settings: TracerSettings | None = None,
    item_decoder: ItemDecoder | None = None,
) -> TraceEvent | None:
    """Like `create_from_event`, but never raises into the host invocation."""

    try:
        return create_from_event(payload, context, settings=settings, item_decoder=item_decoder)
    except TriggerExtractionError:
        logger.exception("Failed to create trigger event")
        return None
