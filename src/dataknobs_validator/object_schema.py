"""Object schema: validates a mapping key by key against a fixed shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .base import Schema
from .exceptions import ConstraintError
from .result import ValidationResult
from .sentinels import UNDEFINED, describe_type


@dataclass(frozen=True)
class ObjectConstraints:
    non_empty: bool = False


class ObjectSchema(Schema[ObjectConstraints]):
    """Schema for mappings with a declared set of keys.

    Each key of the shape is validated with its own schema; keys missing from
    the input are validated as ``UNDEFINED``. Keys not in the shape are
    dropped from the result without an error. Optional keys that are missing
    or invalid are left out of the result entirely.

    Example:
        ```python
        user = v.object({
            "name": v.string(),
            "profile": v.object({
                "age": v.number().positive().integer(),
                "email": v.string().email(),
            }),
        })
        ```
    """

    kind = "object"

    def __init__(self, shape: Mapping[str, Schema[Any]]):
        if not isinstance(shape, Mapping):
            raise ConstraintError("ObjectSchema", "object", shape, "shape must be a mapping")
        for key, child in shape.items():
            if not isinstance(child, Schema):
                raise ConstraintError(
                    "ObjectSchema", "object", child, f"shape entry '{key}' is not a schema"
                )
        self._shape = MappingProxyType(dict(shape))
        super().__init__(ObjectConstraints())

    @property
    def shape(self) -> Mapping[str, Schema[Any]]:
        return self._shape

    def non_empty(self) -> ObjectSchema:
        """Require at least one key in the input and in the validated result."""
        return self._configure(non_empty=True)

    def _check(self, value: Any, config: ObjectConstraints) -> ValidationResult:
        if not isinstance(value, Mapping):
            return ValidationResult.failure(
                f"must be an object, given was {value!r} of type {describe_type(value)}"
            )
        if config.non_empty and len(value) == 0:
            return ValidationResult.failure(
                "must be an object with at least one key-value pair, given was an empty object"
            )

        errors: list[str] = []
        results: dict[str, Any] = {}
        for key, child in self._shape.items():
            outcome = child.validate(value.get(key, UNDEFINED))
            if outcome.valid:
                if child.is_optional and outcome.value is UNDEFINED:
                    continue
                results[key] = outcome.value
            elif not child.is_optional:
                errors.append(f"{key}: {outcome.joined_errors()}")

        if errors:
            return ValidationResult.failure(errors)
        if config.non_empty and not results:
            return ValidationResult.failure(
                "must be an object with at least one valid key-value pair, "
                "during validation the object became empty"
            )
        return ValidationResult.success(results)

    def _config_dict(self, config: ObjectConstraints) -> dict[str, Any]:
        data: dict[str, Any] = {
            "shape": {key: child.to_dict() for key, child in self._shape.items()}
        }
        if config.non_empty:
            data["non_empty"] = True
        return data
