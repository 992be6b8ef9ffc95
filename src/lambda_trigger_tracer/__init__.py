"""Lambda trigger tracer.

Identifies what caused a serverless invocation (an HTTP call, a queue message,
a storage event, ...) and produces one canonical trigger record for it:
- payload classification into a closed set of sources
- per-source extraction of id, resource name/operation and metadata
- metadata size and redaction policy
"""

__version__ = "0.1.0"

from lambda_trigger_tracer.config import TracerSettings
from lambda_trigger_tracer.triggers import SourceTag, TriggerBuilder, create_from_event

__all__ = ["__version__", "SourceTag", "TracerSettings", "TriggerBuilder", "create_from_event"]
