"""Core types for CLI - immutable result type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Generic, Union, Any

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed result containing an error message."""

    error: str
    details: dict[str, Any] | None = None


# Result type - either Success[T] or Failure
Result = Union[Success[T], Failure]
