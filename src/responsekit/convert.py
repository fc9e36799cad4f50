"""Conversions between responses, plain maps and exceptions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from responsekit.constants import OK
from responsekit.constructors import (
    failure_from_map,
    make_failure,
    require_string_keys,
    success_from_map,
)
from responsekit.errors import FailureError, PreconditionError, ValidationError
from responsekit.model import Failure, Response
from responsekit.types import ExceptionLike, OpenMap
from responsekit.validate import is_failure, is_response

logger = logging.getLogger(__name__)


def to_map(response: Response) -> dict[str, Any]:
    """Convert a response to a flat plain map.

    Raises
    ------
    PreconditionError
        If *response* is not a valid success or failure.
    """
    if not is_response(response):
        raise PreconditionError("to_map expects a valid Success or Failure response.")
    return response.as_map()


def from_map(data: OpenMap) -> Response:
    """Rebuild a response from a plain map.

    The map is dispatched on its ``status`` key (``"ok"`` builds a success,
    anything else a failure) and every recognized field is re-validated.

    Raises
    ------
    PreconditionError
        If *data* is not a mapping with string keys or has no ``status`` key.
    ValidationError
        If the map does not conform to the selected response shape.
    """
    if not isinstance(data, Mapping):
        raise PreconditionError(
            f"from_map expects a mapping, got {type(data).__name__}."
        )
    require_string_keys(data, "from_map input")
    if "status" not in data:
        raise PreconditionError("from_map input must contain a 'status' key.")

    try:
        if data["status"] == OK:
            return success_from_map(data)
        return failure_from_map(data)
    except ValidationError as exc:
        raise ValidationError(
            "Response does not conform to the success or failure shape.",
            value=dict(data),
            explain=exc.explain,
        ) from exc


def to_exception(failure: Failure) -> FailureError:
    """Convert a failure into a :class:`FailureError`.

    The title becomes the exception message; all other fields become the
    exception's ``data``.
    """
    if not is_failure(failure):
        raise PreconditionError("to_exception expects a valid Failure response.")
    data = failure.as_map()
    title = data.pop("title")
    return FailureError(title, data)


def _message(exc: BaseException) -> object:
    if exc.args:
        return exc.args[0]
    return str(exc)


def from_exception(exc: ExceptionLike) -> Failure:
    """Convert an exception carrying a ``data`` mapping into a failure.

    ``status`` is read from ``data`` and the title from the exception
    message; a ``title`` key inside ``data`` is discarded.  Remaining keys
    of ``data`` become extra fields.

    Raises
    ------
    PreconditionError
        If *exc* is not an exception with a ``data`` mapping, or ``data`` has
        no ``status`` key.
    ValidationError
        If the rebuilt failure does not conform to the failure shape.
    """
    if not (
        isinstance(exc, BaseException)
        and isinstance(exc, ExceptionLike)
        and isinstance(exc.data, Mapping)
    ):
        raise PreconditionError(
            "from_exception expects an exception carrying a 'data' mapping."
        )
    data = exc.data
    if "status" not in data:
        raise PreconditionError("Exception data must contain a 'status' key.")
    if "title" in data:
        logger.debug("discarding 'title' from exception data in favor of its message")
    extra = {k: v for k, v in data.items() if k not in ("status", "title")}
    return make_failure(data["status"], _message(exc), extra)  # type: ignore[arg-type]
