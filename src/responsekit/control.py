"""Branching and extraction helpers over validated responses."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, assert_never

from responsekit.convert import to_exception
from responsekit.errors import PreconditionError
from responsekit.model import Failure, Response, Success
from responsekit.validate import is_response


def _require_response(response: object, operation: str) -> None:
    if not is_response(response):
        raise PreconditionError(
            f"{operation} expects a valid Success or Failure response."
        )


def unwrap(response: Response) -> Any:
    """Return the result of a success or raise a failure as an exception.

    Raises
    ------
    FailureError
        If *response* is a failure; the title is the message and the other
        fields are the exception ``data``.
    PreconditionError
        If *response* is not a valid response.
    """
    _require_response(response, "unwrap")
    match response:
        case Success(result=result):
            return result
        case Failure():
            raise to_exception(response)
        case _:
            assert_never(response)


def when_success[T](response: Response, fn: Callable[[Any], T]) -> T | None:
    """Call ``fn(result)`` for a success, return ``None`` for a failure."""
    _require_response(response, "when_success")
    if isinstance(response, Success):
        return fn(response.result)
    return None


def when_failure[T](response: Response, fn: Callable[[Failure], T]) -> T | None:
    """Call ``fn(failure)`` for a failure, return ``None`` for a success."""
    _require_response(response, "when_failure")
    if isinstance(response, Failure):
        return fn(response)
    return None


def either[T](
    response: Response,
    on_success: Callable[[Any], T],
    on_failure: Callable[[Failure], T],
) -> T:
    """Branch on the response variant.

    ``on_success`` receives the result payload, ``on_failure`` the failure.
    """
    _require_response(response, "either")
    match response:
        case Success(result=result):
            return on_success(result)
        case Failure():
            return on_failure(response)
        case _:
            assert_never(response)


def match_status[T](
    response: Response,
    handlers: Mapping[str, Callable[[Response], T]],
    default: Callable[[Response], T] | None = None,
) -> T | None:
    """Dispatch on the response status tag.

    Parameters
    ----------
    response : Response
        Valid success or failure.
    handlers : Mapping[str, Callable]
        Handlers keyed by status tag (``"ok"`` selects successes).
    default : Callable, optional
        Fallback for unmatched tags.

    Returns
    -------
    object
        The selected handler's return value, or ``None`` when no handler
        matches and no default is given.
    """
    _require_response(response, "match_status")
    handler = handlers.get(response.status, default)
    if handler is None:
        return None
    return handler(response)
