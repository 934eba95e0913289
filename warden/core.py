"""
Core schema classes for warden.

Provides the Schema and ObjectSchema dataclasses and shorthand conversion.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Generic, TypeVar

from .lib.kinds import Kind
from .types import Result

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Schema(Generic[T]):
    """
    Immutable schema node.

    The fundamental building block. Wraps a parse function with metadata used
    for composition (``kind`` drives Coerce and Intersection) and for Pydantic
    generation (``type_hint``).
    """

    parse: Callable[[Any], Result[T]]
    kind: Kind | None = None
    name: str = "custom"
    type_hint: Any = Any

    def __call__(self, value: Any) -> Result[T]:
        """
        Validate a value.

        Returns:
            Ok(value) with the normalized value if validation passes
            Err(errors) with one ValidationError per problem otherwise
        """
        return self.parse(value)

    def __or__(self, other: Schema | Any) -> Schema:
        """
        Either schema: first match wins.

        Usage:
            String() | Number()
            String() | int
        """
        from .structs import Union

        return Union(self, to_schema(other))

    def __ror__(self, other: Any) -> Schema:
        """Support `str | Number()` where the shorthand comes first."""
        from .structs import Union

        return Union(to_schema(other), self)

    def __and__(self, other: Schema | Any) -> Schema:
        """
        Both object schemas, outputs merged.

        Usage:
            Object({"id": Number()}) & Object({"name": String()})
        """
        from .structs import Intersection

        return Intersection(self, to_schema(other))

    def __rand__(self, other: Any) -> Schema:
        from .structs import Intersection

        return Intersection(to_schema(other), self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self.name}>"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ObjectSchema(Schema[dict[str, Any]]):
    """Schema for a fixed, named shape. Keeps the shape for Extend/Pick/Omit."""

    shape: Mapping[str, Schema] = field(default_factory=lambda: MappingProxyType({}))


def to_schema(v: Any) -> Schema:
    """
    Coerce shorthand to a schema.

    Conversion rules:
        Schema -> pass through
        str | float | bool | date | datetime -> matching primitive
        int -> Number refined to integers
        Enum subclass -> EnumMember
        dict -> Object with recursive conversion
        list -> Array; several items mean an Array of their Union
        tuple -> Tuple
        Callable -> predicate refinement over Unknown
    """
    from . import primitives, structs, validators
    from .modifiers import Refine

    if isinstance(v, Schema):
        return v

    if isinstance(v, type):
        if issubclass(v, Enum):
            return primitives.EnumMember(v)
        if v is str:
            return primitives.String()
        if v is bool:
            return primitives.Boolean()
        if v is int:
            return validators.Int(primitives.Number())
        if v is float:
            return primitives.Number()
        if v is datetime or v is date:
            return primitives.Date()
        logger.debug("Rejected schema shorthand for type %s", v.__name__)
        raise TypeError(f"Cannot convert type {v.__name__} to schema")

    if isinstance(v, dict):
        return structs.Object(v)

    if isinstance(v, list):
        if len(v) == 0:
            raise ValueError("Empty list cannot be converted to schema")
        if len(v) == 1:
            return structs.Array(to_schema(v[0]))
        return structs.Array(structs.Union(*(to_schema(item) for item in v)))

    if isinstance(v, tuple):
        return structs.Tuple(*v)

    if callable(v):
        return Refine(primitives.Unknown(), v)

    raise TypeError(f"Cannot convert {type(v).__name__} to schema")
