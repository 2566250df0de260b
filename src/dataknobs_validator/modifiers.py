"""Modifier policy shared by every schema.

The modifiers (nullable, nullish, default, catch, optional) decide what happens
around the type-specific checks: before them when the input is absent, and
after them when the checks failed.

Precedence for absent (``None`` / ``UNDEFINED``) input, first match wins:

1. default   -> success with the fallback value
2. nullish   -> success with ``None``
3. nullable  -> success with ``None`` (only for ``None``, not ``UNDEFINED``)
4. catch     -> success with the fallback value
5. optional  -> success with ``UNDEFINED``
6. otherwise -> continue into the type checks, which reject the value

Precedence for a failed result: catch, then optional, then the failure itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .result import ValidationResult
from .sentinels import UNDEFINED, UNSET, is_nullish


@dataclass(frozen=True)
class Modifiers:
    """Immutable modifier settings of one schema.

    ``fallback`` is shared by ``default`` and ``catch``: whichever was
    configured last provides the value, while ``has_default`` and ``has_catch``
    independently gate their phases.
    """

    nullable: bool = False
    nullish: bool = False
    has_default: bool = False
    has_catch: bool = False
    fallback: Any = UNSET
    optional: bool = False

    def pre_check(self, value: Any) -> ValidationResult | None:
        """Resolve absent input, or return None to continue validation."""
        if not is_nullish(value):
            return None
        if self.has_default:
            return ValidationResult.success(self.fallback)
        if self.nullish:
            return ValidationResult.success(None)
        if self.nullable and value is None:
            return ValidationResult.success(None)
        if self.has_catch:
            return ValidationResult.success(self.fallback)
        if self.optional:
            return ValidationResult.success(UNDEFINED)
        return None

    def post_check(self, result: ValidationResult) -> ValidationResult:
        """Turn a failed result into a success where catch/optional apply."""
        if result.valid:
            return result
        if self.has_catch:
            return ValidationResult.success(self.fallback)
        if self.optional:
            return ValidationResult.success(UNDEFINED)
        return result

    def to_dict(self) -> dict[str, Any]:
        """Declarative form of the configured modifiers."""
        data: dict[str, Any] = {}
        if self.nullable:
            data["nullable"] = True
        if self.nullish:
            data["nullish"] = True
        if self.has_default:
            data["default"] = self.fallback
        if self.has_catch:
            data["catch"] = self.fallback
        if self.optional:
            data["optional"] = True
        return data
