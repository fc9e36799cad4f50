"""Response predicates and shape checks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from responsekit.errors import ValidationError
from responsekit.model import Failure, Success
from responsekit.schemas import FailureSchema, SuccessSchema

logger = logging.getLogger(__name__)

type Explanation = tuple[dict[str, Any], ...]


def _explanation(exc: SchemaValidationError) -> Explanation:
    return tuple(
        {"loc": tuple(error["loc"]), "type": error["type"], "msg": error["msg"]}
        for error in exc.errors(include_url=False)
    )


def _problems(schema: type[BaseModel], candidate: Mapping[str, Any]) -> Explanation:
    try:
        schema.model_validate(dict(candidate))
    except SchemaValidationError as exc:
        return _explanation(exc)
    return ()


def is_success(value: object) -> bool:
    """Return ``True`` if *value* is a well-formed :class:`Success`."""
    return isinstance(value, Success) and not _problems(SuccessSchema, value.as_map())


def is_failure(value: object) -> bool:
    """Return ``True`` if *value* is a well-formed :class:`Failure`."""
    return isinstance(value, Failure) and not _problems(FailureSchema, value.as_map())


def is_response(value: object) -> bool:
    """Return ``True`` if *value* is a well-formed success or failure."""
    return is_success(value) or is_failure(value)


def explain(value: object) -> Explanation:
    """Describe why *value* is not a valid response.

    Parameters
    ----------
    value : object
        Candidate response.

    Returns
    -------
    tuple[dict, ...]
        One entry per failed constraint (``loc``, ``type``, ``msg``); empty
        when *value* is a valid response.
    """
    if isinstance(value, Success):
        return _problems(SuccessSchema, value.as_map())
    if isinstance(value, Failure):
        return _problems(FailureSchema, value.as_map())
    return (
        {
            "loc": (),
            "type": "response_type",
            "msg": f"Expected Success or Failure, got {type(value).__name__}.",
        },
    )


def _check(schema: type[BaseModel], candidate: Mapping[str, Any], kind: str) -> None:
    problems = _problems(schema, candidate)
    if problems:
        logger.debug("rejected %s response %r: %s", kind, candidate, problems)
        raise ValidationError(
            f"Value does not conform to the {kind} response shape.",
            value=dict(candidate),
            explain=problems,
        )


def check_success_map(candidate: Mapping[str, Any]) -> None:
    """Validate a plain map against the success shape.

    Raises
    ------
    ValidationError
        If any required field is missing or any recognized field is invalid.
    """
    _check(SuccessSchema, candidate, "success")


def check_failure_map(candidate: Mapping[str, Any]) -> None:
    """Validate a plain map against the failure shape.

    Raises
    ------
    ValidationError
        If any required field is missing or any recognized field is invalid.
    """
    _check(FailureSchema, candidate, "failure")
