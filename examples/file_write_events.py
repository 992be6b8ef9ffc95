#!/usr/bin/env python3
"""File write tracing example.

Shows how an instrumentation source outside the trigger engine emits its own
events with the shared primitives:

* `initialize_event` creates a minimal event shell
* `add_to_metadata` attaches metadata under the configured policy
* `finalize_event` records duration and errors, then seals the record

Nothing is patched globally; the caller opts in by using `traced_write_text`.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from lambda_trigger_tracer.config import TracerSettings
from lambda_trigger_tracer.events import CollectingSink, EventSink, finalize_event, initialize_event
from lambda_trigger_tracer.metadata import MetadataPolicy, add_to_metadata

FILE_SYSTEM = "file_system"


def traced_write_text(
    path: Path,
    data: str,
    *,
    sink: EventSink,
    policy: MetadataPolicy | None = None,
) -> int:
    """Write `data` to `path` and emit a file_system event for the write."""

    event, start_time = initialize_event(FILE_SYSTEM, str(path), "write_text", FILE_SYSTEM)
    add_to_metadata(event, {"size": len(data)}, {"data": data}, policy=policy)
    try:
        written = path.write_text(data, encoding="utf-8")
    except OSError as e:
        sink.emit(finalize_event(event, start_time, e))
        raise
    sink.emit(finalize_event(event, start_time))
    return written


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write a file and print the traced event.")
    parser.add_argument("--path", required=True, type=Path, help="File to write")
    parser.add_argument("--data", default="hello", help="Text to write")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = TracerSettings()
    settings.setup_logging()

    sink = CollectingSink()
    traced_write_text(args.path, args.data, sink=sink, policy=settings.metadata_policy)

    for event in sink.events:
        print(event.to_json())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
