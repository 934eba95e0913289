"""
Derived validators for warden.

Provides factory functions that layer a constraint over an existing schema.
All of them are Refine or Transform applications.
"""

from __future__ import annotations

import re
from dataclasses import replace
from datetime import date
from typing import Any

from .core import Schema
from .modifiers import Refine, Transform
from .primitives import String

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def _comparable(value: Any) -> Any:
    """Strings and collections compare by length, numbers and dates by value."""
    if isinstance(value, (str, list, tuple, dict)):
        return len(value)
    return value


def Email(
    schema: Schema[str] | None = None, message: str = "Expected valid email address"
) -> Schema[str]:
    """
    Validate an email address.

    Usage:
        Email()
        Email(Chain(String(), str.strip))
    """
    return Refine(schema or String(), lambda s: EMAIL_PATTERN.match(s) is not None, message)


def Uuid(schema: Schema[str] | None = None, message: str = "Expected valid uuid") -> Schema[str]:
    """Validate a hyphenated, hex UUID string of any version."""
    return Refine(schema or String(), lambda s: UUID_PATTERN.match(s) is not None, message)


def Matches(schema: Schema[str], pattern: str, message: str | None = None) -> Schema[str]:
    """
    Validate that a string matches a regex pattern.

    Usage:
        Matches(String(), r"^[a-z]+$")
        Matches(String(), r"\\d{3}-\\d{4}", "Expected a phone number")
    """
    compiled = re.compile(pattern)
    return Refine(
        schema,
        lambda s: compiled.match(s) is not None,
        message or f"Must match pattern: {pattern}",
    )


def Int(schema: Schema, message: str = "Expected number to be an integer") -> Schema[int]:
    """Validate that a number is integral (2.0 counts)."""
    refined = Refine(schema, lambda n: isinstance(n, int) or n.is_integer(), message)
    return replace(refined, type_hint=int)


def Positive(schema: Schema, message: str = "Expected number to be positive") -> Schema:
    return Refine(schema, lambda n: n > 0, message)


def Negative(schema: Schema, message: str = "Expected number to be negative") -> Schema:
    return Refine(schema, lambda n: n < 0, message)


def Min(schema: Schema, bound: int | float | date, message: str | None = None) -> Schema:
    """
    Validate a lower bound, inclusive.

    Numbers and dates are compared by value; strings, lists and mappings by
    length.

    Usage:
        Min(Number(), 0)
        Min(String(), 3)                     # at least 3 characters
        Min(Date(), datetime(2020, 1, 1))
    """
    return Refine(
        schema,
        lambda x: _comparable(x) >= bound,
        message or f"Expected value to be at least {bound}",
    )


def Max(schema: Schema, bound: int | float | date, message: str | None = None) -> Schema:
    """Validate an upper bound, inclusive. Compares like Min."""
    return Refine(
        schema,
        lambda x: _comparable(x) <= bound,
        message or f"Expected value to be at most {bound}",
    )


def Between(
    schema: Schema,
    lower: int | float | date,
    upper: int | float | date,
    inclusive: bool = True,
) -> Schema:
    """Validate value is between bounds."""
    if inclusive:
        return Refine(
            schema,
            lambda x: lower <= _comparable(x) <= upper,
            f"Must be between {lower} and {upper}",
        )

    return Refine(
        schema,
        lambda x: lower < _comparable(x) < upper,
        f"Must be between {lower} and {upper} (exclusive)",
    )


def Clamp(schema: Schema, lower: int | float, upper: int | float) -> Schema:
    """Force a number into [lower, upper] instead of rejecting it."""
    return Transform(schema, lambda n: min(max(n, lower), upper))
