"""Entry point for building schemas.

Example:
    ```python
    from dataknobs_validator import v

    schema = v.object({
        "name": v.string().min(3).max(50),
        "age": v.number().min(0).integer(),
        "newsletter": v.boolean().boolish().default(False),
    })
    result = schema.validate({"name": "Ada", "age": 36, "newsletter": "yes"})
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .array_schema import ArraySchema
from .base import Schema
from .boolean_schema import BooleanSchema
from .date_schema import DateSchema
from .literal_schema import EnumSchema, LiteralSchema
from .number_schema import NumberSchema
from .object_schema import ObjectSchema
from .string_schema import StringSchema


class Validator:
    """Namespace of schema constructors. Each call returns a new schema."""

    @staticmethod
    def string() -> StringSchema:
        return StringSchema()

    @staticmethod
    def number() -> NumberSchema:
        return NumberSchema()

    @staticmethod
    def boolean() -> BooleanSchema:
        return BooleanSchema()

    @staticmethod
    def date() -> DateSchema:
        return DateSchema()

    @staticmethod
    def literal(value: Any) -> LiteralSchema:
        """Schema that only accepts ``value`` itself."""
        return LiteralSchema(value)

    @staticmethod
    def enum(values: Iterable[Any]) -> EnumSchema:
        """Schema that accepts any one of ``values``."""
        return EnumSchema(values)

    @staticmethod
    def seasons() -> EnumSchema:
        """Schema that accepts one of the four season names."""
        return EnumSchema.seasons()

    @staticmethod
    def array(schema: Schema[Any]) -> ArraySchema:
        """Schema for a list whose elements all match ``schema``."""
        return ArraySchema(schema)

    @staticmethod
    def object(shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
        """Schema for a mapping with the keys and child schemas of ``shape``."""
        return ObjectSchema(shape)


v = Validator
