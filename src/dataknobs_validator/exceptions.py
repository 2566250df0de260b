"""Exception hierarchy for the dataknobs_validator package.

Only programmer errors are raised. Invalid *data* never raises; it is reported
through :class:`~dataknobs_validator.result.ValidationResult`.

The hierarchy:

- ``DataknobsValidatorError``: package base, a ``DataknobsError`` with context
- ``ConstraintError``: a chained configuration call received an invalid argument
- ``UnknownLocaleError``: a locale or country key is not in the reference tables
- ``TransformError``: a string transform broke its str -> str contract
- ``SchemaConfigError``: a declarative schema configuration cannot be built

Example:
    ```python
    from dataknobs_validator import v
    from dataknobs_validator.exceptions import ConstraintError

    try:
        v.string().min("five")
    except ConstraintError as e:
        print(e, e.context)
    ```
"""

from __future__ import annotations

from typing import Any

from dataknobs_common.exceptions import ConfigurationError, DataknobsError


class DataknobsValidatorError(DataknobsError):
    """Base exception for the validator package."""

    pass


class ConstraintError(DataknobsValidatorError, ConfigurationError):
    """Raised when a schema configuration call receives an invalid argument.

    Example:
        ```python
        raise ConstraintError("NumberSchema", "min", float("nan"), "parameter is not a number")
        # NumberSchema Constraint Error: min(nan) parameter is not a number
        ```
    """

    def __init__(self, schema: str, constraint: str, value: Any, reason: str):
        self.schema = schema
        self.constraint = constraint
        self.value = value
        super().__init__(
            f"{schema} Constraint Error: {constraint}({value!r}) {reason}",
            context={"schema": schema, "constraint": constraint, "value": value},
        )


class UnknownLocaleError(ConstraintError):
    """Raised when a locale or country key has no entry in a reference table."""

    def __init__(self, schema: str, constraint: str, locale: Any, available: list[str]):
        self.available = available
        super().__init__(schema, constraint, locale, "is not a supported locale")
        self.context["available"] = available


class TransformError(DataknobsValidatorError):
    """Raised when a string transform does not accept or return a string."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(
            f"StringSchema Transform Error: {name}() {message}",
            context={"transform": name},
        )


class SchemaConfigError(DataknobsValidatorError, ConfigurationError):
    """Raised when a declarative schema configuration is invalid."""

    pass


__all__ = [
    "DataknobsValidatorError",
    "ConstraintError",
    "UnknownLocaleError",
    "TransformError",
    "SchemaConfigError",
]
