"""Exception hierarchy for responsekit."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class ResponseKitError(Exception):
    """Base exception for all responsekit errors."""


class ValidationError(ResponseKitError):
    """A constructed or converted value does not conform to the response shape.

    Parameters
    ----------
    message : str
        Human-readable summary.
    value : object
        The offending value, usually the merged candidate map.
    explain : tuple[dict, ...]
        Machine-readable diagnostics, one entry per failed constraint, each
        with ``loc``, ``type`` and ``msg`` keys.
    """

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        explain: tuple[dict[str, Any], ...] = (),
    ) -> None:
        super().__init__(message)
        self.value = value
        self.explain = explain


class PreconditionError(ResponseKitError):
    """An argument has the wrong category entirely (caller contract violation)."""


class FailureError(ResponseKitError):
    """Exception form of a failure response.

    The failure ``title`` is the exception message; every other field of the
    failure is available through the read-only ``data`` mapping.
    """

    def __init__(self, message: str, data: Mapping[str, Any]) -> None:
        super().__init__(message)
        self.message = message
        self.data = MappingProxyType(dict(data))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, dict(self.data)))

    def __repr__(self) -> str:
        return f"FailureError({self.message!r}, {dict(self.data)!r})"
