"""
Structural schemas for warden.

Object, Record, Array and Tuple recurse into composite values; Union and
Intersection combine whole schemas. Every child failure is reported with the
key or index it happened at. By default all children are validated and every
error is collected; see ``validation_context(fail_fast=True)``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, TypeVar
from typing import Union as TypingUnion

from .context import is_fail_fast
from .core import ObjectSchema, Schema, to_schema
from .lib.kinds import Kind, kind_of, mismatch_message
from .missing import MISSING
from .types import Err, Ok, Result, ValidationError, failure, prefix_errors, success

T = TypeVar("T")


def Object(shape: Mapping[str, Any], message: str | None = None) -> ObjectSchema:
    """
    Validate a mapping with a fixed set of named fields.

    Fields are validated in declared order. A key absent from the input is
    validated as MISSING, and left out of the output if it stays MISSING.
    Keys not declared in ``shape`` are dropped from the output.

    Usage:
        Object({"id": Number(), "name": String(), "tags": Array(String())})
        Object({"id": int, "nickname": Optional(String())})
    """
    fields = MappingProxyType({key: to_schema(field) for key, field in shape.items()})

    def parse(value: Any) -> Result[dict[str, Any]]:
        if kind_of(value) is not Kind.OBJECT:
            return failure(message or mismatch_message(Kind.OBJECT, value))

        fail_fast = is_fail_fast()
        data: dict[str, Any] = {}
        errors: list[ValidationError] = []

        for key, schema in fields.items():
            match schema(value.get(key, MISSING)):
                case Ok(field_value):
                    if field_value is not MISSING:
                        data[key] = field_value
                case Err(field_errors):
                    errors.extend(prefix_errors(field_errors, key))
                    if fail_fast:
                        break

        return Err(tuple(errors)) if errors else success(data)

    return ObjectSchema(
        parse=parse,
        kind=Kind.OBJECT,
        name="object",
        type_hint=dict[str, Any],
        shape=fields,
    )


def Record(
    key_schema: Schema, value_schema: Schema[T], message: str | None = None
) -> Schema[dict[Any, T]]:
    """
    Validate a mapping whose keys and values each follow one schema.

    Usage:
        Record(String(), Number())                       # {"a": 1, "b": 2}
        Record(EnumMember(["dev", "prod"]), Object({...}))
    """
    key_schema = to_schema(key_schema)
    value_schema = to_schema(value_schema)

    def parse(value: Any) -> Result[dict[Any, T]]:
        if kind_of(value) is not Kind.OBJECT:
            return failure(message or mismatch_message(Kind.OBJECT, value))

        fail_fast = is_fail_fast()
        data: dict[Any, T] = {}
        errors: list[ValidationError] = []

        for key, item in value.items():
            key_result = key_schema(key)
            if key_result.is_err():
                errors.extend(prefix_errors(key_result.errors, key))
                if fail_fast:
                    break

            item_result = value_schema(item)
            if item_result.is_err():
                errors.extend(prefix_errors(item_result.errors, key))
                if fail_fast:
                    break

            if key_result.is_ok() and item_result.is_ok():
                data[key_result.value] = item_result.value

        return Err(tuple(errors)) if errors else success(data)

    return Schema(
        parse=parse,
        kind=Kind.OBJECT,
        name=f"record<{key_schema.name}, {value_schema.name}>",
        type_hint=dict[key_schema.type_hint, value_schema.type_hint],
    )


def Array(item_schema: Schema[T], message: str | None = None) -> Schema[list[T]]:
    """
    Validate a list (or tuple) whose items all follow one schema.

    Always returns a new list, never the input.

    Usage:
        Array(String())
        Array(Object({"id": Number()}))
    """
    item_schema = to_schema(item_schema)

    def parse(value: Any) -> Result[list[T]]:
        if kind_of(value) is not Kind.ARRAY:
            return failure(message or mismatch_message(Kind.ARRAY, value))

        fail_fast = is_fail_fast()
        data: list[T] = []
        errors: list[ValidationError] = []

        for index, item in enumerate(value):
            match item_schema(item):
                case Ok(item_value):
                    data.append(item_value)
                case Err(item_errors):
                    errors.extend(prefix_errors(item_errors, index))
                    if fail_fast:
                        break

        return Err(tuple(errors)) if errors else success(data)

    return Schema(
        parse=parse,
        kind=Kind.ARRAY,
        name=f"array<{item_schema.name}>",
        type_hint=list[item_schema.type_hint],
    )


def Tuple(*item_schemas: Any, message: str | None = None) -> Schema[list[Any]]:
    """
    Validate a fixed-arity list with one schema per position.

    Positions past the end of a short input are validated as MISSING; items
    past the arity of a long input are dropped.

    Usage:
        Tuple(Number(), Number())                  # a 2D point
        Tuple(String(), Optional(Number()))        # accepts ["a"] too
    """
    schemas = tuple(to_schema(s) for s in item_schemas)
    arity = len(schemas)

    def parse(value: Any) -> Result[list[Any]]:
        if kind_of(value) is not Kind.ARRAY:
            return failure(message or mismatch_message(Kind.ARRAY, value))

        fail_fast = is_fail_fast()
        data: list[Any] = []
        errors: list[ValidationError] = []

        for index, schema in enumerate(schemas):
            item = value[index] if index < len(value) else MISSING
            match schema(item):
                case Ok(item_value):
                    data.append(item_value)
                case Err(item_errors):
                    errors.extend(prefix_errors(item_errors, index))
                    if fail_fast:
                        break

        return Err(tuple(errors)) if errors else success(data)

    return Schema(
        parse=parse,
        kind=Kind.ARRAY,
        name=f"[{', '.join(s.name for s in schemas)}]",
        type_hint=tuple[tuple(s.type_hint for s in schemas)] if arity else tuple[()],
    )


def Union(*schemas: Any, message: str | None = None) -> Schema:
    """
    Accept the first schema that matches, in declared order.

    When nothing matches, the errors of every alternative are returned
    together, or a single error with ``message`` if one is given.

    Usage:
        Union(Number(), String())
        Union(Literal("on"), Literal("off"), message="Expected 'on' or 'off'")
    """
    if not schemas:
        raise ValueError("Union requires at least one schema")
    alternatives = tuple(to_schema(s) for s in schemas)

    def parse(value: Any) -> Result[Any]:
        errors: list[ValidationError] = []
        for schema in alternatives:
            result = schema(value)
            if result.is_ok():
                return result
            errors.extend(result.errors)

        if message is not None:
            return failure(message)
        return Err(tuple(errors))

    return Schema(
        parse=parse,
        name=" | ".join(s.name for s in alternatives),
        type_hint=TypingUnion[tuple(s.type_hint for s in alternatives)],
    )


def Intersection(*schemas: Any, message: str | None = None) -> Schema[dict[str, Any]]:
    """
    Apply several object schemas to the same value and merge their outputs.

    Later schemas win when two outputs share a key. Nothing is merged unless
    every schema succeeds.

    Usage:
        Intersection(Object({"id": Number()}), Object({"name": String()}))

    Raises:
        TypeError: if a schema does not produce objects
    """
    if not schemas:
        raise ValueError("Intersection requires at least one schema")
    components = tuple(to_schema(s) for s in schemas)
    for schema in components:
        if schema.kind is not Kind.OBJECT:
            raise TypeError(f'Schema "{schema.name}" is not an object schema')

    def parse(value: Any) -> Result[dict[str, Any]]:
        if kind_of(value) is not Kind.OBJECT:
            return failure(message or mismatch_message(Kind.OBJECT, value))

        fail_fast = is_fail_fast()
        data: dict[str, Any] = {}
        errors: list[ValidationError] = []

        for schema in components:
            match schema(value):
                case Ok(part):
                    data.update(part)
                case Err(part_errors):
                    errors.extend(err for err in part_errors if err not in errors)
                    if fail_fast:
                        break

        return Err(tuple(errors)) if errors else success(data)

    return Schema(
        parse=parse,
        kind=Kind.OBJECT,
        name=" & ".join(s.name for s in components),
        type_hint=dict[str, Any],
    )


def _require_object_schema(schema: Any) -> ObjectSchema:
    if not isinstance(schema, ObjectSchema):
        raise TypeError(f"Expected an Object schema, got {schema!r}")
    return schema


def Extend(*schemas: ObjectSchema, message: str | None = None) -> ObjectSchema:
    """
    Merge the shapes of several Object schemas into one Object schema.

    Later shapes win on shared keys.
    """
    merged: dict[str, Schema] = {}
    for schema in schemas:
        merged.update(_require_object_schema(schema).shape)
    return Object(merged, message)


def Pick(schema: ObjectSchema, keys: Iterable[str]) -> ObjectSchema:
    """Object schema with only ``keys`` from ``schema``'s shape."""
    shape = _require_object_schema(schema).shape
    wanted = set(keys)
    unknown = wanted - set(shape)
    if unknown:
        raise ValueError(f"Cannot pick unknown keys: {sorted(unknown)}")
    return Object({key: field for key, field in shape.items() if key in wanted})


def Omit(schema: ObjectSchema, keys: Iterable[str]) -> ObjectSchema:
    """Object schema without ``keys`` from ``schema``'s shape."""
    shape = _require_object_schema(schema).shape
    dropped = set(keys)
    unknown = dropped - set(shape)
    if unknown:
        raise ValueError(f"Cannot omit unknown keys: {sorted(unknown)}")
    return Object({key: field for key, field in shape.items() if key not in dropped})
