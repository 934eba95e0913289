"""
Warden - composable runtime validation for JSON-like data.

Usage:
    from warden import Array, Email, Number, Object, Optional, String, unsafe_parse

    user = Object({
        "id": Number(),
        "name": String(),
        "email": Optional(Email()),
        "tags": Array(String()),
    })

    result = user(payload)               # Ok(value) or Err(errors)
    value = unsafe_parse(user, payload)  # value, or raises ParseError
"""

from .context import is_fail_fast, validation_context
from .core import ObjectSchema, Schema, to_schema
from .errors import ParseError
from .lib.kinds import Kind, kind_of
from .missing import MISSING
from .modifiers import AndThen, Chain, Coerce, Defaulted, Nullable, Optional, Refine, Transform
from .primitives import (
    Any,
    AsBoolean,
    AsDate,
    AsNumber,
    AsString,
    Boolean,
    Date,
    EnumMember,
    Literal,
    Number,
    String,
    Unknown,
)
from .schema import is_valid, to_pydantic, unsafe_parse, validate
from .structs import Array, Extend, Intersection, Object, Omit, Pick, Record, Tuple, Union
from .types import Err, Ok, Result, ValidationError, failure, prefix_errors, success
from .validators import (
    Between,
    Clamp,
    Email,
    Int,
    Matches,
    Max,
    Min,
    Negative,
    Positive,
    Uuid,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "ValidationError",
    "success",
    "failure",
    "prefix_errors",
    # Core
    "Schema",
    "ObjectSchema",
    "to_schema",
    "Kind",
    "kind_of",
    "MISSING",
    # Primitives
    "String",
    "Number",
    "Boolean",
    "Date",
    "Literal",
    "EnumMember",
    "Any",
    "Unknown",
    "AsString",
    "AsNumber",
    "AsBoolean",
    "AsDate",
    # Modifiers
    "Nullable",
    "Optional",
    "Defaulted",
    "Refine",
    "Transform",
    "AndThen",
    "Chain",
    "Coerce",
    # Structures
    "Object",
    "Record",
    "Array",
    "Tuple",
    "Union",
    "Intersection",
    "Extend",
    "Pick",
    "Omit",
    # Validators
    "Email",
    "Uuid",
    "Matches",
    "Int",
    "Positive",
    "Negative",
    "Min",
    "Max",
    "Between",
    "Clamp",
    # Entry points
    "validate",
    "is_valid",
    "unsafe_parse",
    "to_pydantic",
    "ParseError",
    # Configuration
    "validation_context",
    "is_fail_fast",
]
