"""Pydantic schemas for runtime validation of response shapes."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    field_validator,
    model_validator,
)

from responsekit.constants import FAILURE_OPTIONAL_KEYS, OK, SUCCESS_OPTIONAL_KEYS


def _require_token(value: str) -> str:
    if any(char.isspace() for char in value):
        raise ValueError(f"{value!r} must not contain whitespace.")
    return value


def _mapping_to_dict(value: object) -> object:
    if isinstance(value, Mapping) and not isinstance(value, dict):
        return dict(value)
    return value


NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]
Tag = Annotated[
    str, StringConstraints(strict=True, min_length=1), AfterValidator(_require_token)
]
FieldErrors = Annotated[dict[Tag, Any], BeforeValidator(_mapping_to_dict)]


def _reject_explicit_none(data: Any, optional_keys: tuple[str, ...]) -> Any:
    if isinstance(data, Mapping):
        nulls = sorted(key for key in optional_keys if key in data and data[key] is None)
        if nulls:
            raise ValueError(
                f"Optional fields must be omitted rather than set to None: {', '.join(nulls)}."
            )
    return data


class SuccessSchema(BaseModel):
    """Validated shape of a success response."""

    model_config = ConfigDict(extra="allow", strict=True, frozen=True)

    status: Literal["ok"]
    result: Any = None
    trace_id: NonEmptyStr | None = None
    timestamp: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _validate_absent_fields(cls, data: Any) -> Any:
        return _reject_explicit_none(data, SUCCESS_OPTIONAL_KEYS)


class FailureSchema(BaseModel):
    """Validated shape of a failure response.

    ``fields`` is exposed as ``field_errors`` on the model to stay clear of
    pydantic's own attribute names; callers always use the ``fields`` key.
    """

    model_config = ConfigDict(extra="allow", strict=True, frozen=True)

    status: Tag
    title: NonEmptyStr
    detail: NonEmptyStr | None = None
    retryable: StrictBool | None = None
    cause: NonEmptyStr | None = None
    field_errors: FieldErrors | None = Field(default=None, alias="fields")
    trace_id: NonEmptyStr | None = None
    timestamp: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _validate_absent_fields(cls, data: Any) -> Any:
        return _reject_explicit_none(data, FAILURE_OPTIONAL_KEYS)

    @field_validator("status")
    @classmethod
    def _validate_status(cls, value: str) -> str:
        if value == OK:
            raise ValueError(f"Failure status cannot be the reserved {OK!r} tag.")
        return value
