"""Validated constructors for success and failure responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from responsekit.constants import FAILURE_KEYS, OK, SUCCESS_KEYS
from responsekit.errors import PreconditionError
from responsekit.model import Failure, Success
from responsekit.types import OpenMap, StatusTag
from responsekit.validate import check_failure_map, check_success_map


def require_string_keys(mapping: Mapping[Any, Any], name: str) -> None:
    """Raise when *mapping* has keys that are not strings."""
    bad = [key for key in mapping if not isinstance(key, str)]
    if bad:
        raise PreconditionError(
            f"{name} keys must be strings, got: {', '.join(repr(key) for key in bad)}."
        )


def _merge(base: dict[str, Any], extra: OpenMap | None) -> dict[str, Any]:
    if extra is None:
        return base
    if not isinstance(extra, Mapping):
        raise PreconditionError(
            f"extra must be a mapping, got {type(extra).__name__}."
        )
    require_string_keys(extra, "extra")
    return {**base, **extra}


def success_from_map(candidate: OpenMap) -> Success:
    """Build a :class:`Success` from a map that passes the success shape."""
    check_success_map(candidate)
    return Success(
        result=candidate.get("result"),
        trace_id=candidate.get("trace_id"),
        timestamp=candidate.get("timestamp"),
        extra={k: v for k, v in candidate.items() if k not in SUCCESS_KEYS},
    )


def failure_from_map(candidate: OpenMap) -> Failure:
    """Build a :class:`Failure` from a map that passes the failure shape."""
    check_failure_map(candidate)
    return Failure(
        status=candidate["status"],
        title=candidate["title"],
        detail=candidate.get("detail"),
        retryable=candidate.get("retryable"),
        cause=candidate.get("cause"),
        fields=candidate.get("fields"),
        trace_id=candidate.get("trace_id"),
        timestamp=candidate.get("timestamp"),
        extra={k: v for k, v in candidate.items() if k not in FAILURE_KEYS},
    )


def make_success(payload: Any = None, extra: OpenMap | None = None) -> Success:
    """Create a success response.

    Parameters
    ----------
    payload : Any, default=None
        Result value; any object, including ``None``.
    extra : Mapping[str, Any] | None, optional
        Metadata merged on top of ``{"status": "ok", "result": payload}``.
        Recognized keys (``trace_id``, ``timestamp``) are validated, all
        others are kept as-is.

    Returns
    -------
    Success
        Validated success response.

    Raises
    ------
    PreconditionError
        If *extra* is not a mapping with string keys.
    ValidationError
        If the merged value does not conform to the success shape.
    """
    return success_from_map(_merge({"status": OK, "result": payload}, extra))


def make_failure(
    status: StatusTag, title: str, extra: OpenMap | None = None
) -> Failure:
    """Create a failure response.

    Parameters
    ----------
    status : str
        Identifier tagging the failure kind, never ``"ok"``.
    title : str
        Non-empty human-readable message.
    extra : Mapping[str, Any] | None, optional
        Metadata merged on top of ``{"status": status, "title": title}``.

    Returns
    -------
    Failure
        Validated failure response.

    Raises
    ------
    PreconditionError
        If *extra* is not a mapping with string keys.
    ValidationError
        If the merged value does not conform to the failure shape.
    """
    return failure_from_map(_merge({"status": status, "title": title}, extra))
