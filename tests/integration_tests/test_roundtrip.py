"""Integration tests for round-trips between the three response forms."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

import responsekit
from responsekit import (
    Failure,
    Success,
    from_exception,
    from_map,
    make_failure,
    make_success,
    to_exception,
    to_map,
    unwrap,
)

STAMP = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

RESPONSES = [
    make_success(None),
    make_success({"user_id": 123}, {"trace_id": "test-trace"}),
    make_success([1, 2], {"timestamp": STAMP, "page": 2}),
    make_failure("not_found", "Not found"),
    make_failure(
        "rate_limited",
        "Too many requests",
        {
            "detail": "Rate limit exceeded",
            "retryable": True,
            "cause": "User exceeded quota",
            "fields": {"limit": 100, "current": 150},
            "trace_id": "xyz789",
            "timestamp": STAMP,
            "attempt": 3,
        },
    ),
]


@pytest.mark.parametrize("response", RESPONSES)
def test_map_roundtrip(response: Success | Failure) -> None:
    """Reproduce any valid response from its map projection."""
    assert from_map(to_map(response)) == response


@pytest.mark.parametrize(
    "failure", [r for r in RESPONSES if isinstance(r, Failure)]
)
def test_exception_roundtrip(failure: Failure) -> None:
    """Reproduce any valid failure from its exception form."""
    assert from_exception(to_exception(failure)) == failure


def test_timeout_scenario() -> None:
    """Convert a retryable timeout to an exception and back."""
    original = make_failure("timeout", "Request timeout", {"retryable": True})
    exc = to_exception(original)
    assert str(exc) == "Request timeout"
    assert exc.data == {"status": "timeout", "retryable": True}
    assert from_exception(exc) == original


def test_unwrap_failure_roundtrips_through_raised_error() -> None:
    """Rebuild the failure from the error raised by unwrap."""
    original = make_failure("timeout", "Request timeout", {"retryable": True, "attempt": 3})
    with pytest.raises(responsekit.FailureError) as info:
        unwrap(original)
    assert from_exception(info.value) == original


def test_public_api_exports() -> None:
    """Expose the documented API at package level."""
    assert responsekit.OK == "ok"
    for name in responsekit.__all__:
        assert hasattr(responsekit, name)
