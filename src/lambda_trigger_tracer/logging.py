"""Structured logging for the tracer.

One JSON object per line on stdout. The fields the tracer attaches through
`extra=` (the classified `tag`, the matching `rule`, a finished `trace_event`)
are lifted to top-level keys so log queries can filter on them directly.
Anything else passed in `extra=` lands under `context`.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

TRACE_FIELDS: tuple[str, ...] = ("tag", "rule", "source", "trace_event")

# Attributes every LogRecord carries, whatever the interpreter version.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

QUIET_LOGGERS: tuple[str, ...] = ("boto3", "botocore")


class TraceJsonFormatter(logging.Formatter):
    """Render a log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        out: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context: dict[str, Any] = {}
        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            if key in TRACE_FIELDS:
                out[key] = value
            else:
                context[key] = value
        if context:
            out["context"] = context

        if record.exc_info:
            out["exception"] = self.formatException(record.exc_info)

        # Payload fragments are not guaranteed to be JSON-native.
        return json.dumps(out, ensure_ascii=False, default=str)


def configure_logging(level: str, stream: TextIO | None = None) -> None:
    """Route all logging through one JSON handler at `level`."""

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(TraceJsonFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())

    # The AWS SDK is only used for in-memory decoding; its debug chatter is noise.
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.WARNING))
