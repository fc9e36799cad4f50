"""Standardized, validated success and failure responses."""

from __future__ import annotations

from responsekit.constants import OK
from responsekit.constructors import make_failure, make_success
from responsekit.control import either, match_status, unwrap, when_failure, when_success
from responsekit.convert import from_exception, from_map, to_exception, to_map
from responsekit.errors import (
    FailureError,
    PreconditionError,
    ResponseKitError,
    ValidationError,
)
from responsekit.model import Failure, Response, Success
from responsekit.validate import explain, is_failure, is_response, is_success

__version__ = "0.1.0"

__all__ = [
    "OK",
    "Failure",
    "FailureError",
    "PreconditionError",
    "Response",
    "ResponseKitError",
    "Success",
    "ValidationError",
    "either",
    "explain",
    "from_exception",
    "from_map",
    "is_failure",
    "is_response",
    "is_success",
    "make_failure",
    "make_success",
    "match_status",
    "to_exception",
    "to_map",
    "unwrap",
    "when_failure",
    "when_success",
]
