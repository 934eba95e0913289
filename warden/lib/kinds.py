"""
Runtime classification of input values.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any

from ..missing import _Missing


class Kind(Enum):
    """The closed set of value kinds a schema can see."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"
    OTHER = "other"


SCALAR_KINDS = frozenset({Kind.STRING, Kind.NUMBER, Kind.BOOLEAN, Kind.NULL})


def kind_of(value: Any) -> Kind:
    """Classify a value. ``bool`` is checked before ``int`` on purpose."""
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if value is None:
        return Kind.NULL
    if isinstance(value, _Missing):
        return Kind.UNDEFINED
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, Mapping):
        return Kind.OBJECT
    if isinstance(value, date):
        return Kind.DATE
    return Kind.OTHER


def type_name(value: Any) -> str:
    """Name used in mismatch messages."""
    kind = kind_of(value)
    if kind is Kind.OTHER:
        return type(value).__name__
    return kind.value


def mismatch_message(expected: Kind, value: Any) -> str:
    return f"Expecting type '{expected.value}'. Got type '{type_name(value)}'."


def is_finite(value: int | float) -> bool:
    # math.isfinite overflows on very large ints; ints are always finite
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def strict_equals(a: Any, b: Any) -> bool:
    """Equality that never crosses kinds, so ``True`` does not match ``1``."""
    return kind_of(a) is kind_of(b) and a == b
