"""Marker values for absent input and unconfigured settings.

``None`` plays the role of an explicit null. Two further markers are needed:

- ``UNDEFINED`` stands for a value that was never supplied at all: the default
  argument of ``validate()``, the value seen for a key missing from an object
  input, and the value an optional schema resolves to.
- ``UNSET`` marks a configuration slot that was never given a value, for slots
  where ``None`` is itself a legitimate configured value (e.g. ``default(None)``).
"""

from __future__ import annotations

from typing import Any


class _Undefined:
    """Singleton type of :data:`UNDEFINED`."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


class _Unset:
    """Singleton type of :data:`UNSET`."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<unset>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNDEFINED = _Undefined()
UNSET = _Unset()


def is_nullish(value: Any) -> bool:
    """Return True for ``None`` and ``UNDEFINED``."""
    return value is None or value is UNDEFINED


def describe_type(value: Any) -> str:
    """Short type label used in error messages."""
    if value is None:
        return "None"
    if value is UNDEFINED:
        return "undefined"
    return type(value).__name__


__all__ = ["UNDEFINED", "UNSET", "is_nullish", "describe_type"]
