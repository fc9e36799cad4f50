"""Reserved tags and recognized field names for response values."""

from __future__ import annotations

OK = "ok"

SUCCESS_OPTIONAL_KEYS = ("trace_id", "timestamp")
FAILURE_OPTIONAL_KEYS = (
    "detail",
    "retryable",
    "cause",
    "fields",
    "trace_id",
    "timestamp",
)

SUCCESS_KEYS = frozenset(("status", "result", *SUCCESS_OPTIONAL_KEYS))
FAILURE_KEYS = frozenset(("status", "title", *FAILURE_OPTIONAL_KEYS))
