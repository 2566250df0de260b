"""Boolean schema with truthiness and "boolish" string coercion.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .base import Schema
from .coercion import to_text
from .exceptions import ConstraintError
from .result import ValidationResult
from .sentinels import is_nullish

DEFAULT_TRUTHY = frozenset(["true", "1", "yes", "on", "y", "enabled", "ja", "j", "wahr"])
DEFAULT_FALSY = frozenset(["false", "0", "no", "off", "n", "disabled", "nein", "falsch"])


@dataclass(frozen=True)
class BooleanConstraints:
    """Constraint settings of a BooleanSchema."""

    coerce: bool = False
    boolish: bool = False
    truthy_values: frozenset[str] = DEFAULT_TRUTHY
    falsy_values: frozenset[str] = DEFAULT_FALSY
    require_true: bool = False
    require_false: bool = False


class BooleanSchema(Schema[BooleanConstraints]):
    """Schema for boolean values.

    Without coercion only ``True`` and ``False`` pass. ``coerce()`` applies
    Python truthiness; ``boolish()`` instead maps strings such as ``"yes"`` or
    ``"off"``, which are common in external APIs and form data.
    """

    kind = "boolean"

    def __init__(self) -> None:
        super().__init__(BooleanConstraints())

    def coerce(self) -> BooleanSchema:
        """Coerce with Python truthiness (``bool(value)``).

        Use ``boolish()`` to accept only recognized true/false words.
        """
        return self._configure(coerce=True)

    def boolish(
        self,
        truthy: Iterable[Any] | None = None,
        falsy: Iterable[Any] | None = None,
    ) -> BooleanSchema:
        """Coerce from recognized words instead of truthiness.

        By default ``"true", "1", "yes", "on", "y", "enabled", "ja", "j",
        "wahr"`` coerce to True and ``"false", "0", "no", "off", "n",
        "disabled", "nein", "falsch"`` to False. Matching is case-insensitive
        and ignores surrounding whitespace; anything else fails validation.

        Args:
            truthy: Replacement set of words that mean True
            falsy: Replacement set of words that mean False

        Example:
            ```python
            schema = v.boolean().boolish(
                truthy=["true", "1", "yes", "on"],
                falsy=["false", "0", "no", "off"],
            )
            ```
        """
        changes: dict[str, Any] = {"coerce": True, "boolish": True}
        if truthy is not None:
            changes["truthy_values"] = _word_set("truthy", truthy)
        if falsy is not None:
            changes["falsy_values"] = _word_set("falsy", falsy)
        return self._configure(**changes)

    def truthy(self) -> BooleanSchema:
        """Coerce with truthiness and require the result to be True.

        Shorthand for ``coerce().true()``.
        """
        return self._configure(coerce=True, require_true=True, require_false=False)

    def falsy(self) -> BooleanSchema:
        """Coerce with truthiness and require the result to be False.

        Shorthand for ``coerce().false()``.
        """
        return self._configure(coerce=True, require_false=True, require_true=False)

    def true(self) -> BooleanSchema:
        """Require the (possibly coerced) value to be True."""
        return self._configure(require_true=True, require_false=False)

    def false(self) -> BooleanSchema:
        """Require the (possibly coerced) value to be False."""
        return self._configure(require_false=True, require_true=False)

    def _check(self, value: Any, config: BooleanConstraints) -> ValidationResult:
        if config.coerce:
            if config.boolish:
                coerced = _from_boolish(value, config)
                if coerced is None:
                    return ValidationResult.failure(f"must be a boolish value, given was {value!r}")
                value = coerced
            else:
                value = bool(value)

        if not isinstance(value, bool):
            return ValidationResult.failure(f"must be a boolean, given was {value!r}")
        if config.require_true and not value:
            return ValidationResult.failure(f"must be truthy, given was {value!r}")
        if config.require_false and value:
            return ValidationResult.failure(f"must be falsy, given was {value!r}")
        return ValidationResult.success(value)

    def _config_dict(self, config: BooleanConstraints) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if config.boolish:
            data["boolish"] = {
                "truthy": sorted(config.truthy_values),
                "falsy": sorted(config.falsy_values),
            }
        elif config.coerce:
            data["coerce"] = True
        if config.require_true:
            data["true"] = True
        if config.require_false:
            data["false"] = True
        return data


def _from_boolish(value: Any, config: BooleanConstraints) -> bool | None:
    word = "" if is_nullish(value) else to_text(value).strip().lower()
    if word in config.truthy_values:
        return True
    if word in config.falsy_values:
        return False
    return None


def _word_set(name: str, words: Any) -> frozenset[str]:
    if isinstance(words, str) or not isinstance(words, Iterable):
        raise ConstraintError("BooleanSchema", "boolish", words, f"{name} values must be a list of strings")
    return frozenset(to_text(word).strip().lower() for word in words)
