"""Array schema: validates every element against one element schema.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from .base import Schema
from .exceptions import ConstraintError
from .result import ValidationResult
from .sentinels import UNDEFINED, describe_type


@dataclass(frozen=True)
class ArrayConstraints:
    """Length settings of an ArraySchema; None means unset."""

    min: int | None = None
    max: int | None = None


class ArraySchema(Schema[ArrayConstraints]):
    """Schema for lists (and tuples) of uniformly validated elements.

    Elements are validated in order. With an optional element schema, invalid
    or missing elements are dropped from the result. Error messages carry the
    element's index in the input; length limits apply to the elements that
    remain after dropping.

    Example:
        ```python
        notes = v.array(v.object({
            "title": v.string().max(32),
            "content": v.string(),
        }))
        notes.validate([{"title": "soft egg recipe", "content": "cook egg for 3 minutes"}])
        ```
    """

    kind = "array"

    def __init__(self, element: Schema[Any]):
        if not isinstance(element, Schema):
            raise ConstraintError("ArraySchema", "array", element, "element must be a schema")
        self._element = element
        super().__init__(ArrayConstraints())

    @property
    def element(self) -> Schema[Any]:
        return self._element

    def min(self, value: int) -> ArraySchema:
        """Require at least ``value`` elements."""
        return self._configure(min=_length_arg("min", value))

    def max(self, value: int) -> ArraySchema:
        """Require at most ``value`` elements."""
        return self._configure(max=_length_arg("max", value))

    def non_empty(self) -> ArraySchema:
        """Require at least one element. A larger minimum is kept."""
        current = self._config.min
        if current is None or current < 1:
            return self._configure(min=1)
        return self

    def _check(self, value: Any, config: ArrayConstraints) -> ValidationResult:
        if not isinstance(value, (list, tuple)):
            return ValidationResult.failure(f"must be an array, given was {describe_type(value)}")

        element = self._element
        optional = element.is_optional
        errors: list[str] = []
        results: list[Any] = []
        for index, item in enumerate(value):
            outcome = element.validate(item)
            if outcome.valid:
                if optional and outcome.value is UNDEFINED:
                    continue
                results.append(outcome.value)
            elif not optional:
                errors.append(f"{index}: {outcome.joined_errors()}")

        if errors:
            return ValidationResult.failure(errors)

        count = len(results)
        if config.min is not None and count < config.min:
            return ValidationResult.failure(
                f"must be an array with {config.min} or more elements, "
                f"given was an array with {count} elements"
            )
        if config.max is not None and count > config.max:
            return ValidationResult.failure(
                f"must be an array with {config.max} or fewer elements, "
                f"given was an array with {count} elements"
            )
        return ValidationResult.success(results)

    def _config_dict(self, config: ArrayConstraints) -> dict[str, Any]:
        data: dict[str, Any] = {"of": self._element.to_dict()}
        if config.min is not None:
            data["min"] = config.min
        if config.max is not None:
            data["max"] = config.max
        return data


def _length_arg(constraint: str, value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise ConstraintError("ArraySchema", constraint, value, "parameter is not a number")
    return value
