"""
Best-effort conversions applied before strict validation.

None of these raise: a value that cannot be converted comes back in a form
the strict schema will reject.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Callable

from ..missing import MISSING
from .kinds import Kind, kind_of

TRUTHY_STRINGS = frozenset({"true", "yes", "on"})
NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def to_string(value: Any) -> Any:
    kind = kind_of(value)
    if kind is Kind.UNDEFINED:
        return value
    if kind is Kind.BOOLEAN:
        return "true" if value else "false"
    if kind is Kind.NULL:
        return "null"
    if kind is Kind.DATE:
        return value.isoformat()
    # integral floats render without a fraction: 1.0 -> "1"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)


def to_number(value: Any) -> Any:
    kind = kind_of(value)
    if kind is Kind.NUMBER:
        return value
    if kind is Kind.BOOLEAN:
        return int(value)
    if kind is Kind.STRING:
        text = value.strip()
        if not text:
            return 0
        if NUMERIC_PATTERN.fullmatch(text) is None:
            return float("nan")
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return float("nan")
    if isinstance(value, datetime):
        return value.timestamp()
    return float("nan")


def to_boolean(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    if value is MISSING:
        return False
    return bool(value)


def to_date(value: Any) -> Any:
    kind = kind_of(value)
    if kind is Kind.STRING:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return value
    if kind is Kind.NUMBER:
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return value
    return value


COERCIONS: dict[Kind, Callable[[Any], Any]] = {
    Kind.STRING: to_string,
    Kind.NUMBER: to_number,
    Kind.BOOLEAN: to_boolean,
    Kind.DATE: to_date,
}
