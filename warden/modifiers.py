"""
Modifier schemas for warden.

Wrap an existing schema to change how absent values, nulls or successful
results are handled.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar
from typing import Optional as TypingOptional

from .core import Schema
from .lib.coercion import COERCIONS
from .missing import MISSING
from .types import Predicate, Result, failure, success

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


def Nullable(schema: Schema[T]) -> Schema[T | None]:
    """
    Allow None, validate if present.

    Usage:
        Nullable(String())        # None or valid string
    """

    def parse(value: Any) -> Result[T | None]:
        if value is None:
            return success(None)
        return schema(value)

    return Schema(
        parse=parse,
        name=f"nullable<{schema.name}>",
        type_hint=TypingOptional[schema.type_hint],
    )


def Optional(schema: Schema[T]) -> Schema[T]:
    """
    Allow the value to be absent (MISSING), validate if present.

    None is still handed to ``schema``; combine with Nullable to accept both:
        Optional(Nullable(String()))
    """

    def parse(value: Any) -> Result[T]:
        if value is MISSING:
            return success(MISSING)
        return schema(value)

    return Schema(
        parse=parse,
        name=f"optional<{schema.name}>",
        type_hint=schema.type_hint,
    )


def Defaulted(schema: Schema[T], fallback: T | Callable[[], T]) -> Schema[T]:
    """
    Substitute ``fallback`` when the value is absent.

    A callable fallback is invoked on every use, so each result gets a fresh
    default:
        Defaulted(Number(), 10)
        Defaulted(Array(String()), list)
        Defaulted(Date(), datetime.now)

    A present but invalid value still fails.
    """

    def parse(value: Any) -> Result[T]:
        if value is MISSING:
            return success(fallback() if callable(fallback) else fallback)
        return schema(value)

    return Schema(
        parse=parse,
        kind=schema.kind,
        name=schema.name,
        type_hint=schema.type_hint,
    )


def Refine(
    schema: Schema[T], predicate: Predicate, message: str | None = None
) -> Schema[T]:
    """
    Add a constraint on top of a successful validation.

    Usage:
        Refine(Number(), lambda n: n > 0, "Must be positive")
        Refine(String(), str.isalpha)
    """

    def parse(value: Any) -> Result[T]:
        result = schema(value)
        if result.is_err():
            return result
        validated = result.value

        try:
            passed = predicate(validated)
        except Exception as e:
            return failure(f"Validation error: {e}")

        if not passed:
            return failure(message or f"Validation failed for value: {repr(validated)[:50]}")
        return result

    return Schema(
        parse=parse,
        kind=schema.kind,
        name=schema.name,
        type_hint=schema.type_hint,
    )


def Transform(schema: Schema[T], fn: Callable[[T], U]) -> Schema[U]:
    """
    Map a successful value into a new representation.

    Usage:
        Transform(String(), int)
        Transform(Object({"x": Number(), "y": Number()}), lambda p: (p["x"], p["y"]))
    """

    def parse(value: Any) -> Result[U]:
        return schema(value).map(fn)

    return Schema(parse=parse, name=schema.name)


def AndThen(schema: Schema[T], fn: Callable[[T], Result[U]]) -> Schema[U]:
    """
    Continue a successful validation with a function that may itself fail.

    Usage:
        def parse_port(text):
            return success(int(text)) if text.isdigit() else failure("Not a port")

        AndThen(String(), parse_port)
    """

    def parse(value: Any) -> Result[U]:
        return schema(value).and_then(fn)

    return Schema(parse=parse, name=schema.name)


def Chain(schema: Schema[T], *fns: Callable[[T], T]) -> Schema[T]:
    """
    Apply same-type functions in order after a successful validation.

    Usage:
        Chain(String(), str.strip, str.lower)
    """

    def run(value: T) -> T:
        for fn in fns:
            value = fn(value)
        return value

    def parse(value: Any) -> Result[T]:
        return schema(value).map(run)

    return Schema(
        parse=parse,
        kind=schema.kind,
        name=schema.name,
        type_hint=schema.type_hint,
    )


def Coerce(schema: Schema[T]) -> Schema[T]:
    """
    Convert the value towards the schema's kind before validating it.

    Only string, number, boolean and date schemas can be coerced.

    Raises:
        TypeError: if the schema's declared kind has no conversion
    """
    convert = COERCIONS.get(schema.kind)
    if convert is None:
        logger.debug("Rejected coercion of schema %r", schema)
        raise TypeError(f'Schema "{schema.name}" cannot be coerced')

    def parse(value: Any) -> Result[T]:
        return schema(convert(value))

    return Schema(
        parse=parse,
        kind=schema.kind,
        name=schema.name,
        type_hint=schema.type_hint,
    )
