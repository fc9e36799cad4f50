"""Unit tests for branching and extraction helpers."""

from __future__ import annotations

import pytest

from responsekit.constructors import make_failure, make_success
from responsekit.control import either, match_status, unwrap, when_failure, when_success
from responsekit.errors import FailureError, PreconditionError
from responsekit.model import Failure, Success


def test_unwrap_success_returns_result() -> None:
    """Return the payload of a success."""
    assert unwrap(make_success("data")) == "data"
    assert unwrap(make_success({"data": 42})) == {"data": 42}


def test_unwrap_failure_raises_failure_error() -> None:
    """Raise the failure with title as message and other fields as data."""
    with pytest.raises(FailureError, match="Resource not found") as info:
        unwrap(make_failure("not_found", "Resource not found"))
    assert info.value.data == {"status": "not_found"}


def test_unwrap_failure_keeps_metadata_in_data() -> None:
    """Carry failure metadata on the raised exception."""
    with pytest.raises(FailureError, match="Invalid input") as info:
        unwrap(make_failure("invalid_params", "Invalid input", {"detail": "Field 'name' is required"}))
    assert info.value.data["detail"] == "Field 'name' is required"


def test_when_success_and_when_failure() -> None:
    """Evaluate the body only on the matching branch."""
    ok = make_success(2)
    err = make_failure("timeout", "Request timeout")
    assert when_success(ok, lambda value: value * 10) == 20
    assert when_success(err, lambda value: value * 10) is None
    assert when_failure(err, lambda failure: failure.status) == "timeout"
    assert when_failure(ok, lambda failure: failure.status) is None


def test_either_branches_on_variant() -> None:
    """Route successes and failures to their own callbacks."""

    def describe(response: Success | Failure) -> str:
        return either(response, lambda value: f"ok:{value}", lambda failure: failure.title)

    assert describe(make_success(1)) == "ok:1"
    assert describe(make_failure("conflict", "Conflict")) == "Conflict"


def test_match_status_dispatches_on_tag() -> None:
    """Select handlers by status and fall back to the default."""
    handlers = {
        "ok": lambda response: "success",
        "not_found": lambda response: "missing",
    }
    assert match_status(make_success(1), handlers) == "success"
    assert match_status(make_failure("not_found", "Nope"), handlers) == "missing"
    assert match_status(make_failure("timeout", "Slow"), handlers) is None
    assert (
        match_status(make_failure("timeout", "Slow"), handlers, default=lambda r: r.status)
        == "timeout"
    )


@pytest.mark.parametrize(
    "call",
    [
        lambda value: unwrap(value),
        lambda value: when_success(value, lambda result: result),
        lambda value: when_failure(value, lambda failure: failure),
        lambda value: either(value, lambda result: result, lambda failure: failure),
        lambda value: match_status(value, {}),
    ],
)
@pytest.mark.parametrize(
    "value", [None, {"status": "ok", "result": 1}, Failure(status="x", title="")]
)
def test_helpers_require_valid_response(call: object, value: object) -> None:
    """Raise PreconditionError before evaluating any body."""
    with pytest.raises(PreconditionError, match="expects a valid"):
        call(value)  # type: ignore[operator]
