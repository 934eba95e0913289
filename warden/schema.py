"""
Entry points for warden.

Provides validate(), is_valid(), unsafe_parse() and to_pydantic().
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from typing import Optional as TypingOptional

from pydantic import Field, create_model

from .core import ObjectSchema, Schema, to_schema
from .errors import ParseError
from .missing import MISSING
from .types import Err, Ok, Result

T = TypeVar("T")

logger = logging.getLogger(__name__)


def validate(value: Any, schema: Schema[T] | Any) -> Result[T]:
    """
    Validate data against a schema.

    Args:
        value: The value to validate
        schema: A Schema, or shorthand accepted by to_schema

    Returns:
        Ok(value) with the normalized value if validation passes
        Err(errors) if validation fails

    Usage:
        schema = {
            "name": String(),
            "email": Optional(Email()),
            "age": Min(int, 0),
        }
        result = validate({"name": "Alice", "age": 30}, schema)
    """
    return to_schema(schema)(value)


def is_valid(schema: Schema | Any, value: Any) -> bool:
    """True if ``value`` passes ``schema``."""
    return to_schema(schema)(value).is_ok()


def unsafe_parse(schema: Schema[T], value: Any) -> T:
    """
    Validate and return the normalized value, raising on failure.

    Raises:
        ParseError: carrying every ValidationError, one per message line
    """
    match schema(value):
        case Ok(parsed):
            return parsed
        case Err(errors):
            logger.debug("unsafe_parse failed for %r with %d error(s)", schema, len(errors))
            raise ParseError(errors)


def to_pydantic(name: str, schema: ObjectSchema | dict[str, Any]) -> type:
    """
    Compile an object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Object schema or dict shorthand

    Returns:
        A Pydantic BaseModel subclass

    A field is required unless its schema accepts MISSING; the value the
    schema produces for MISSING (e.g. a Defaulted fallback) becomes the
    field's default. Nested Object schemas become nested models.

    Usage:
        User = to_pydantic("User", {
            "name": String(),
            "email": Optional(Email()),
        })
        user = User(name="Alice")
    """
    compiled = to_schema(schema)
    if not isinstance(compiled, ObjectSchema):
        raise TypeError("Schema must be an Object schema")

    fields: dict[str, Any] = {}
    for key, field in compiled.shape.items():
        fields[key] = _extract_pydantic_field(f"{name}_{key}", field)

    return create_model(name, **fields)


def _extract_pydantic_field(model_name: str, field: Schema) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a schema."""
    field_type = field.type_hint
    if isinstance(field, ObjectSchema):
        field_type = to_pydantic(model_name, field)

    match field(MISSING):
        case Ok(value) if value is MISSING:
            return (TypingOptional[field_type], None)
        case Ok(_):
            return (field_type, Field(default_factory=lambda: field(MISSING).value))

    return (field_type, ...)
