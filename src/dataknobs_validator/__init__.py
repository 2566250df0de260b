"""Dataknobs Validator - fluent, composable runtime data validation.

Schemas are assembled from chained configuration calls and validate untrusted
input into either a normalized value or an ordered list of error messages:

- Primitive schemas: string, number, boolean, date, literal, enum
- Composite schemas: object (keyed shape) and array (uniform elements)
- Modifiers on every schema: nullable, nullish, default, catch, optional
- Declarative schemas from dictionaries, YAML or JSON via the factory
"""

from .array_schema import ArraySchema
from .base import Schema
from .boolean_schema import BooleanSchema
from .date_schema import DateSchema
from .exceptions import (
    ConstraintError,
    DataknobsValidatorError,
    SchemaConfigError,
    TransformError,
    UnknownLocaleError,
)
from .factory import SchemaFactory, load_schema, schema_factory
from .literal_schema import EnumSchema, LiteralSchema
from .modifiers import Modifiers
from .number_schema import NumberSchema
from .object_schema import ObjectSchema
from .result import ValidationResult
from .sentinels import UNDEFINED
from .string_schema import StringSchema
from .validator import Validator, v

__version__ = "0.2.0"

__all__ = [
    # Entry points
    "Validator",
    "v",
    # Result types
    "ValidationResult",
    "UNDEFINED",
    # Schemas
    "Schema",
    "Modifiers",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "DateSchema",
    "LiteralSchema",
    "EnumSchema",
    "ObjectSchema",
    "ArraySchema",
    # Factories
    "SchemaFactory",
    "schema_factory",
    "load_schema",
    # Exceptions
    "DataknobsValidatorError",
    "ConstraintError",
    "UnknownLocaleError",
    "TransformError",
    "SchemaConfigError",
]
