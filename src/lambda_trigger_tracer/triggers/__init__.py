"""Trigger identification: classify an invocation payload and extract a
canonical trigger record from it."""

from .builder import (
    InvocationContext,
    TriggerBuilder,
    TriggerExtractionError,
    create_from_event,
    safe_create_from_event,
)
from .classifier import CLASSIFICATION_RULES, classify
from .registry import EXTRACTORS, UnknownSourceTagError, get_extractor
from .source_types import SourceTag

__all__ = [
    "CLASSIFICATION_RULES",
    "EXTRACTORS",
    "InvocationContext",
    "SourceTag",
    "TriggerBuilder",
    "TriggerExtractionError",
    "UnknownSourceTagError",
    "classify",
    "create_from_event",
    "get_extractor",
    "safe_create_from_event",
]
