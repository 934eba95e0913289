"""
Leaf schemas for warden.

Provides factory functions that return Schema instances for scalar values.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from enum import Enum
from typing import Any as TypingAny
from typing import Iterable
from typing import Literal as TypingLiteral
from typing import Union as TypingUnion

from .core import Schema
from .lib.kinds import SCALAR_KINDS, Kind, is_finite, kind_of, mismatch_message, strict_equals
from .modifiers import Coerce
from .types import Result, failure, success

logger = logging.getLogger(__name__)


def _expect(kind: Kind, message: str | None):
    """Build a parse function that only checks the value's kind."""

    def parse(value: TypingAny) -> Result[TypingAny]:
        if kind_of(value) is kind:
            return success(value)
        return failure(message or mismatch_message(kind, value))

    return parse


def String(message: str | None = None) -> Schema[str]:
    """
    Validate that value is a string.

    Usage:
        String()
        String("Name must be text")
    """
    return Schema(
        parse=_expect(Kind.STRING, message),
        kind=Kind.STRING,
        name="string",
        type_hint=str,
    )


def Number(message: str | None = None) -> Schema[int | float]:
    """
    Validate that value is a finite int or float.

    Booleans are not numbers. NaN and infinities are rejected with their own
    message unless a custom ``message`` is given.
    """
    check_kind = _expect(Kind.NUMBER, message)

    def parse(value: TypingAny) -> Result[int | float]:
        result = check_kind(value)
        if result.is_err():
            return result
        if not is_finite(value):
            return failure(message or "Expecting value to be a finite 'number'.")
        return result

    return Schema(
        parse=parse,
        kind=Kind.NUMBER,
        name="number",
        type_hint=TypingUnion[int, float],
    )


def Boolean(message: str | None = None) -> Schema[bool]:
    """Validate that value is a bool."""
    return Schema(
        parse=_expect(Kind.BOOLEAN, message),
        kind=Kind.BOOLEAN,
        name="boolean",
        type_hint=bool,
    )


def Date(message: str | None = None) -> Schema[date]:
    """
    Validate that value is a date or datetime.

    Python dates cannot hold an invalid instant and are immutable, so the
    validated value is the input itself.
    """
    return Schema(
        parse=_expect(Kind.DATE, message),
        kind=Kind.DATE,
        name="date",
        type_hint=TypingUnion[datetime, date],
    )


def Literal(constant: str | int | float | bool | None, message: str | None = None) -> Schema:
    """
    Validate that value is exactly ``constant``.

    Usage:
        Literal("admin")
        Literal(None)
        Object({"type": Literal("circle"), "radius": Number()})

    Raises:
        TypeError: if ``constant`` is not a str, number, bool or None, or is NaN
    """
    if kind_of(constant) not in SCALAR_KINDS:
        logger.debug("Rejected literal constant of type %s", type(constant).__name__)
        raise TypeError(
            "'constant' literal should be of type 'str | int | float | bool | None'. "
            f"Got '{type(constant).__name__}'"
        )
    if isinstance(constant, float) and math.isnan(constant):
        raise TypeError("'constant' literal cannot be NaN; it would never match")

    def parse(value: TypingAny) -> Result[TypingAny]:
        if strict_equals(constant, value):
            return success(value)
        return failure(message or f"Expecting literal {constant!r}. Got {value!r}.")

    return Schema(
        parse=parse,
        name=f"literal<{constant!r}>",
        type_hint=TypingLiteral[constant],
    )


def EnumMember(values: type[Enum] | Iterable[TypingAny], message: str | None = None) -> Schema:
    """
    Validate that value is one of a fixed set of scalars.

    Usage:
        EnumMember(Color)                    # values of an Enum subclass
        EnumMember(["active", "inactive"])   # any iterable of scalars

    The allowed values are collected once, here.
    """
    if isinstance(values, type) and issubclass(values, Enum):
        allowed = tuple(member.value for member in values)
    elif isinstance(values, (str, bytes)):
        raise TypeError("EnumMember expects an Enum or an iterable of values, not a single string")
    else:
        allowed = tuple(values)

    if not allowed:
        raise ValueError("EnumMember requires at least one allowed value")
    for candidate in allowed:
        if kind_of(candidate) not in SCALAR_KINDS:
            raise TypeError(
                f"Enum values must be str, number, bool or None. Got '{type(candidate).__name__}'"
            )
        if isinstance(candidate, float) and math.isnan(candidate):
            raise TypeError("Enum values cannot be NaN; it would never match")

    listing = " | ".join(repr(v) for v in allowed)

    def parse(value: TypingAny) -> Result[TypingAny]:
        if any(strict_equals(candidate, value) for candidate in allowed):
            return success(value)
        return failure(message or f"Expecting value to be one of {listing}. Got {value!r}.")

    return Schema(
        parse=parse,
        name=f"enum<{listing}>",
        type_hint=TypingLiteral[allowed],
    )


def Any() -> Schema[TypingAny]:
    """
    A pass-through schema typed as Any.

    Do not use this unless you really need to, it defeats the purpose of
    validating.
    """
    return Schema(parse=success, name="any")


def Unknown() -> Schema[TypingAny]:
    """A pass-through schema for values that are handled downstream."""
    return Schema(parse=success, name="unknown")


def AsString(message: str | None = None) -> Schema[str]:
    """Coerce first, then check the value is a string."""
    return Coerce(String(message))


def AsNumber(message: str | None = None) -> Schema[int | float]:
    """
    Coerce first, then check the value is a finite number.

    Usage:
        AsNumber()("42")    # Ok(42)
        AsNumber()("abc")   # Err: the coerced value is NaN
    """
    return Coerce(Number(message))


def AsBoolean(message: str | None = None) -> Schema[bool]:
    """Coerce first ("true", "yes", "on" are true), then check it is a bool."""
    return Coerce(Boolean(message))


def AsDate(message: str | None = None) -> Schema[date]:
    """Coerce ISO strings and POSIX timestamps first, then check it is a date."""
    return Coerce(Date(message))
