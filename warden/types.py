"""
Type definitions for warden.

Provides the Result type (Ok/Err), the ValidationError record and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Iterable, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    A single validation failure.

    ``path`` is empty where a leaf validator raises the error; every enclosing
    structural validator prepends the key or index it was inspecting.
    """

    message: str
    path: tuple[str, ...] = ()

    def with_prefix(self, segment: str | int) -> ValidationError:
        return replace(self, path=(str(segment), *self.path))

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{'.'.join(self.path)}: {self.message}"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return fn(self.value)

    def fold(
        self,
        on_failure: Callable[[tuple[ValidationError, ...]], R],
        on_success: Callable[[T], R],
    ) -> R:
        return on_success(self.value)


@dataclass(frozen=True, slots=True)
class Err:
    """Failure result carrying one or more validation errors."""

    errors: tuple[ValidationError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Err requires at least one ValidationError")

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err:
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> Err:
        return self

    def fold(
        self,
        on_failure: Callable[[tuple[ValidationError, ...]], R],
        on_success: Callable[[Any], R],
    ) -> R:
        return on_failure(self.errors)


Result = Union[Ok[T], Err]

# Type aliases
ParseFn = Callable[[Any], Result[Any]]
Predicate = Callable[[Any], bool]


def success(value: T) -> Ok[T]:
    """Wrap a value in ``Ok``."""
    return Ok(value)


def failure(*errors: ValidationError | str) -> Err:
    """
    Build an ``Err`` from errors or bare messages.

    Usage:
        failure("Expected string")
        failure(ValidationError("Too short", ("name",)))
    """
    return Err(
        tuple(e if isinstance(e, ValidationError) else ValidationError(e) for e in errors)
    )


def prefix_errors(
    errors: Iterable[ValidationError], segment: str | int
) -> tuple[ValidationError, ...]:
    """Prepend ``segment`` to the path of every error."""
    return tuple(err.with_prefix(segment) for err in errors)
