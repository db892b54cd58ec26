"""Tagged success/failure values returned at validation boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


def is_ok(result: "Result") -> bool:
    return isinstance(result, Ok)


def unwrap(result: "Result"):
    """Return the success value, or raise the carried error."""
    if isinstance(result, Ok):
        return result.value
    raise result.error


def unwrap_err(result: "Result"):
    if isinstance(result, Err):
        return result.error
    raise ValueError(f"Expected Err, got {result!r}")


__all__ = ["Ok", "Err", "Result", "is_ok", "unwrap", "unwrap_err"]
