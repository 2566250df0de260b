"""Literal and enum schemas: exact-value matching without coercion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .base import Schema
from .coercion import is_number
from .exceptions import ConstraintError
from .result import ValidationResult

#: Members of the ``seasons`` preset
SEASONS = ("spring", "summer", "autumn", "winter")


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality that does not cross type families.

    ``1 == 1.0`` holds, but ``True`` never equals ``1`` and ``"1"`` never
    equals ``1``.
    """
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number(left) and is_number(right):
        return left == right
    return type(left) is type(right) and left == right


@dataclass(frozen=True)
class LiteralConstraints:
    value: Any = None


class LiteralSchema(Schema[LiteralConstraints]):
    """Schema accepting exactly one value.

    Example:
        ```python
        v.literal("hello").validate("hello")
        # ValidationResult(valid=True, value='hello', errors=[])
        ```
    """

    kind = "literal"

    def __init__(self, value: Any):
        super().__init__(LiteralConstraints(value))

    @property
    def value(self) -> Any:
        return self._config.value

    def _check(self, value: Any, config: LiteralConstraints) -> ValidationResult:
        if strictly_equal(value, config.value):
            return ValidationResult.success(value)
        return ValidationResult.failure(f"must be {config.value!r}, given was {value!r}")

    def _config_dict(self, config: LiteralConstraints) -> dict[str, Any]:
        return {"value": config.value}


@dataclass(frozen=True)
class EnumConstraints:
    values: tuple[Any, ...] = ()


class EnumSchema(Schema[EnumConstraints]):
    """Schema accepting any member of a fixed set of values.

    Example:
        ```python
        v.enum(["red", "green", "blue"]).validate("red")
        # ValidationResult(valid=True, value='red', errors=[])
        ```
    """

    kind = "enum"

    def __init__(self, values: Iterable[Any]):
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise ConstraintError("EnumSchema", "enum", values, "parameter must be a list of values")
        members = tuple(values)
        if not members:
            raise ConstraintError("EnumSchema", "enum", values, "requires at least one allowed value")
        super().__init__(EnumConstraints(members))

    @classmethod
    def seasons(cls) -> EnumSchema:
        """Enum of the four seasons: spring, summer, autumn and winter."""
        return cls(SEASONS)

    @property
    def values(self) -> tuple[Any, ...]:
        return self._config.values

    def _check(self, value: Any, config: EnumConstraints) -> ValidationResult:
        if any(strictly_equal(value, member) for member in config.values):
            return ValidationResult.success(value)
        allowed = ", ".join(str(member) for member in config.values)
        return ValidationResult.failure(f"must be one of {allowed}, given was {value!r}")

    def _config_dict(self, config: EnumConstraints) -> dict[str, Any]:
        return {"values": list(config.values)}
