"""Number schema with sign, range, integer and step rules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from .base import Schema
from .coercion import is_number, to_number
from .exceptions import ConstraintError
from .result import ValidationResult
from .sentinels import describe_type


@dataclass(frozen=True)
class NumberConstraints:
    """Constraint settings of a NumberSchema; None means unset."""

    coerce: bool = False
    integer: bool = False
    positive: bool = False
    negative: bool = False
    min: float | None = None
    max: float | None = None
    multiple_of: float | None = None


class NumberSchema(Schema[NumberConstraints]):
    """Schema for numeric values (``int``/``float``, never ``bool``).

    Checks run in order and stop at the first failure: integer, positive,
    negative, min, max, multiple_of.

    Example:
        ```python
        schema = v.number().positive().integer().min(0).max(100)
        schema.validate(50)
        # ValidationResult(valid=True, value=50, errors=[])
        ```
    """

    kind = "number"

    def __init__(self) -> None:
        super().__init__(NumberConstraints())

    def coerce(self) -> NumberSchema:
        """Convert the input to a number before validating.

        Booleans convert to 0/1 and ``None`` to 0; numeric strings are parsed.
        Input that does not convert fails as a type error.
        """
        return self._configure(coerce=True)

    def integer(self) -> NumberSchema:
        """Require a whole number."""
        return self._configure(integer=True)

    def positive(self) -> NumberSchema:
        """Require a value greater than 0.

        Zero is neither positive nor negative; use ``min(0)`` for a
        non-negative check.
        """
        return self._configure(positive=True)

    def negative(self) -> NumberSchema:
        """Require a value less than 0. Use ``max(0)`` for non-positive."""
        return self._configure(negative=True)

    def min(self, value: float) -> NumberSchema:
        """Require ``value <= input`` (inclusive)."""
        return self._configure(min=_number_arg("min", value))

    def max(self, value: float) -> NumberSchema:
        """Require ``input <= value`` (inclusive)."""
        return self._configure(max=_number_arg("max", value))

    def multiple_of(self, value: float) -> NumberSchema:
        """Require the input to be a multiple of ``value``.

        A divisor of 0 leaves the check disabled.
        """
        return self._configure(multiple_of=_number_arg("multiple_of", value))

    step = multiple_of
    int = integer

    def _check(self, value: Any, config: NumberConstraints) -> ValidationResult:
        given = value
        if config.coerce:
            value = to_number(value)
        if not is_number(value):
            return ValidationResult.failure(f"must be a number, given was {describe_type(given)}")

        if config.integer and not _is_integral(value):
            return ValidationResult.failure(f"must be an integer, given was {given!r}")
        if config.positive and not value > 0:
            return ValidationResult.failure(f"must be a positive number, given was {given!r}")
        if config.negative and not value < 0:
            return ValidationResult.failure(f"must be a negative number, given was {given!r}")
        if config.min is not None and not value >= config.min:
            return ValidationResult.failure(
                f"must be greater than or equal {config.min}, given was {given!r}"
            )
        if config.max is not None and not value <= config.max:
            return ValidationResult.failure(
                f"must be less than or equal {config.max}, given was {given!r}"
            )
        if config.multiple_of and not _is_multiple(value, config.multiple_of):
            return ValidationResult.failure(
                f"must be a multiple of {config.multiple_of}, given was {given!r}"
            )
        return ValidationResult.success(value)

    def _config_dict(self, config: NumberConstraints) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for flag in ("coerce", "integer", "positive", "negative"):
            if getattr(config, flag):
                data[flag] = True
        for option in ("min", "max", "multiple_of"):
            setting = getattr(config, option)
            if setting is not None:
                data[option] = setting
        return data


def _is_integral(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return value == math.floor(value)


def _is_multiple(value: Any, divisor: Any) -> bool:
    try:
        return value % divisor == 0
    except OverflowError:
        # Too large to convert to the divisor's float type
        return False


def _number_arg(constraint: str, value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise ConstraintError("NumberSchema", constraint, value, "parameter is not a number")
    return value
