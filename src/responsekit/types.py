"""Shared type aliases and protocols for response modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

type OpenMap = Mapping[str, Any]
type StatusTag = str
type FieldKey = str


@runtime_checkable
class ExceptionLike(Protocol):
    """Marker protocol for exceptions carrying a structured payload."""

    data: Mapping[str, Any]
