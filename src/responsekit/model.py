"""Immutable success and failure response values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from responsekit.constants import OK
from responsekit.types import FieldKey


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


def _present(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _thawed(mapping: Mapping[str, Any] | None) -> dict[str, Any] | None:
    return dict(mapping) if isinstance(mapping, Mapping) else mapping


def _items(mapping: Mapping[str, Any] | None) -> tuple[tuple[str, Any], ...] | None:
    if not isinstance(mapping, Mapping):
        return mapping
    return tuple(sorted(mapping.items()))


@dataclass(frozen=True)
class Success:
    """Successful outcome carrying an arbitrary ``result`` payload.

    ``None`` in ``trace_id`` or ``timestamp`` means the field is absent.
    Unrecognized keys live in ``extra``.
    """

    result: Any = None
    trace_id: str | None = None
    timestamp: datetime | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", _frozen(self.extra))

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self),
            (self.result, self.trace_id, self.timestamp, dict(self.extra)),
        )

    def __hash__(self) -> int:
        return hash((self.result, self.trace_id, self.timestamp, _items(self.extra)))

    @property
    def status(self) -> str:
        return OK

    def as_map(self) -> dict[str, Any]:
        """Project the response onto a flat map without validating it."""
        data: dict[str, Any] = {"status": OK, "result": self.result}
        data.update(_present(trace_id=self.trace_id, timestamp=self.timestamp))
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class Failure:
    """Failed outcome tagged by a non-``"ok"`` status and a human-readable title.

    ``None`` in any optional slot means the field is absent.  Unrecognized
    keys live in ``extra``.
    """

    status: str
    title: str
    detail: str | None = None
    retryable: bool | None = None
    cause: str | None = None
    fields: Mapping[FieldKey, Any] | None = None
    trace_id: str | None = None
    timestamp: datetime | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.fields, Mapping):
            object.__setattr__(self, "fields", _frozen(self.fields))
        object.__setattr__(self, "extra", _frozen(self.extra))

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self),
            (
                self.status,
                self.title,
                self.detail,
                self.retryable,
                self.cause,
                _thawed(self.fields),
                self.trace_id,
                self.timestamp,
                dict(self.extra),
            ),
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.status,
                self.title,
                self.detail,
                self.retryable,
                self.cause,
                _items(self.fields),
                self.trace_id,
                self.timestamp,
                _items(self.extra),
            )
        )

    def as_map(self) -> dict[str, Any]:
        """Project the response onto a flat map without validating it."""
        data: dict[str, Any] = {"status": self.status, "title": self.title}
        data.update(
            _present(
                detail=self.detail,
                retryable=self.retryable,
                cause=self.cause,
                fields=_thawed(self.fields),
                trace_id=self.trace_id,
                timestamp=self.timestamp,
            )
        )
        data.update(self.extra)
        return data


type Response = Success | Failure
