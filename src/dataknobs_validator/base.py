"""Abstract schema with the fluent modifier API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Generic, TypeVar

from .modifiers import Modifiers
from .result import ValidationResult
from .sentinels import UNDEFINED

S = TypeVar("S", bound="Schema")
C = TypeVar("C")


class Schema(ABC, Generic[C]):
    """Base class for all schemas.

    A schema is configured through chained calls, each of which returns the
    same instance. Configuration lives in two frozen snapshots: the shared
    :class:`Modifiers` and a per-type constraint config ``C``. Every chained
    call swaps in a new snapshot, and ``validate`` reads each snapshot once,
    so a running validation never sees a partially applied configuration.
    Configuring a schema while another thread validates against it is still
    unsupported: finish the chain before sharing the schema.
    """

    #: Name used for the ``type`` key of the declarative form
    kind: str = "schema"

    def __init__(self, config: C):
        self._modifiers = Modifiers()
        self._config = config

    # -- modifiers ---------------------------------------------------------

    def nullable(self: S) -> S:
        """Accept ``None`` as a valid value."""
        self._modifiers = replace(self._modifiers, nullable=True)
        return self

    def nullish(self: S) -> S:
        """Accept both ``None`` and ``UNDEFINED``, resolving them to ``None``."""
        self._modifiers = replace(self._modifiers, nullish=True)
        return self

    def default(self: S, value: Any) -> S:
        """Use ``value`` whenever the input is absent (``None`` or ``UNDEFINED``).

        Use ``catch()`` to fall back on a value when validation fails.
        """
        self._modifiers = replace(self._modifiers, has_default=True, fallback=value)
        return self

    def catch(self: S, value: Any) -> S:
        """Use ``value`` when validation fails, or when the input is absent
        and neither ``nullish`` nor ``nullable`` accepted it.
        """
        self._modifiers = replace(self._modifiers, has_catch=True, fallback=value)
        return self

    default_catch = catch

    def optional(self: S) -> S:
        """Resolve absent or invalid input to ``UNDEFINED``.

        Inside an object or array schema, optional entries that resolve to
        ``UNDEFINED`` are removed from the result altogether.
        """
        self._modifiers = replace(self._modifiers, optional=True)
        return self

    @property
    def is_optional(self) -> bool:
        return self._modifiers.optional

    @property
    def modifiers(self) -> Modifiers:
        return self._modifiers

    @property
    def config(self) -> C:
        return self._config

    def _configure(self: S, **changes: Any) -> S:
        self._config = replace(self._config, **changes)  # type: ignore[type-var]
        return self

    # -- validation --------------------------------------------------------

    def validate(self, value: Any = UNDEFINED) -> ValidationResult:
        """Validate ``value`` against this schema.

        Never raises for invalid data; failures are reported in the result.

        Args:
            value: The value to validate. Omit it to validate an absent value.

        Returns:
            ValidationResult with the normalized value or the error messages
        """
        modifiers = self._modifiers
        early = modifiers.pre_check(value)
        if early is not None:
            return early
        return modifiers.post_check(self._check(value, self._config))

    @abstractmethod
    def _check(self, value: Any, config: C) -> ValidationResult:
        """Run the type-specific coercion and constraint checks."""

    # -- introspection -----------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Declarative representation accepted by ``SchemaFactory.create``."""
        data: dict[str, Any] = {"type": self.kind}
        data.update(self._config_dict(self._config))
        data.update(self._modifiers.to_dict())
        return data

    def _config_dict(self, config: C) -> dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
