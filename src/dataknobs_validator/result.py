"""Validation result type with consistent, predictable behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single ``validate`` call.

    Either ``valid`` is True and ``value`` holds the normalized value, or
    ``valid`` is False and ``errors`` holds at least one message, in the order
    the checks were evaluated. A failed result never carries a value.
    """

    valid: bool
    value: Any = None
    errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.valid and self.errors:
            raise ValueError("A successful ValidationResult cannot carry errors")
        if not self.valid and not self.errors:
            raise ValueError("A failed ValidationResult needs at least one error")

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        """Create a successful validation result.

        Args:
            value: The validated value

        Returns:
            Successful ValidationResult
        """
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, errors: list[str] | str) -> ValidationResult:
        """Create a failed validation result.

        Args:
            errors: Error message or ordered list of error messages

        Returns:
            Failed ValidationResult
        """
        if isinstance(errors, str):
            errors = [errors]
        return cls(valid=False, errors=list(errors))

    def joined_errors(self, separator: str = ", ") -> str:
        """Render the error list as a single line."""
        return separator.join(self.errors)
