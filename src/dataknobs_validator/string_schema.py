"""String schema with length, format, locale and transform rules.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Mapping

from . import patterns
from .base import Schema
from .coercion import OBJECT_MARKER, to_text
from .exceptions import ConstraintError, TransformError, UnknownLocaleError
from .result import ValidationResult
from .sentinels import describe_type

logger = logging.getLogger(__name__)

TransformFn = Callable[[str], str]


@dataclass(frozen=True)
class Transform:
    """A named str -> str step applied before the constraint checks."""

    name: str
    fn: TransformFn
    builtin: bool = False

    def apply(self, value: str) -> str:
        if not isinstance(value, str):
            raise TransformError(self.name, "can only be applied to string values")
        result = self.fn(value)
        if not isinstance(result, str):
            raise TransformError(
                self.name, f"must return a string, returned {type(result).__name__}"
            )
        return result


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:].lower()


BUILTIN_TRANSFORMS: Mapping[str, TransformFn] = {
    "trim": str.strip,
    "to_lower_case": str.lower,
    "to_upper_case": str.upper,
    "capitalized": _capitalize,
}


@dataclass(frozen=True)
class StringConstraints:
    """Constraint settings of a StringSchema; None means unset."""

    coerce: bool = False
    min: int | None = None
    max: int | None = None
    length: int | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    email: bool = False
    base64: bool = False
    alpha: str | None = None
    alphanumeric: str | None = None
    numeric: bool = False
    postal: str | None = None
    iso31661_alpha2: bool = False
    iban: str | None = None
    bic: bool = False
    ip: int | None = None
    transforms: tuple[Transform, ...] = ()


class StringSchema(Schema[StringConstraints]):
    """Schema for string values.

    Constraints are checked in a fixed order and the first violation ends the
    validation: min, max, length, starts_with, ends_with, email, base64, alpha,
    alphanumeric, numeric, postal, iso31661_alpha2, iban, bic, ip. Transforms
    run before all of them, in the order they were added.

    Example:
        ```python
        schema = v.string().trim().min(5).max(20).email()
        schema.validate(" mail@tld.com ")
        # ValidationResult(valid=True, value='mail@tld.com', errors=[])
        ```
    """

    kind = "string"

    def __init__(self) -> None:
        super().__init__(StringConstraints())

    def coerce(self) -> StringSchema:
        """Convert non-string input to text before validating.

        ``None`` becomes ``"null"``; mappings and plain objects are rejected.
        """
        return self._configure(coerce=True)

    def min(self, value: int) -> StringSchema:
        """Require at least ``value`` characters."""
        return self._configure(min=_length_arg("min", value))

    def max(self, value: int) -> StringSchema:
        """Require at most ``value`` characters."""
        return self._configure(max=_length_arg("max", value))

    def length(self, value: int) -> StringSchema:
        """Require exactly ``value`` characters."""
        return self._configure(length=_length_arg("length", value))

    def non_empty(self) -> StringSchema:
        """Require at least one character. A larger minimum is kept."""
        current = self._config.min
        if current is None or current < 1:
            return self._configure(min=1)
        return self

    def starts_with(self, value: str) -> StringSchema:
        """Require the given prefix."""
        return self._configure(starts_with=_text_arg("starts_with", value))

    def ends_with(self, value: str) -> StringSchema:
        """Require the given suffix."""
        return self._configure(ends_with=_text_arg("ends_with", value))

    def email(self) -> StringSchema:
        return self._configure(email=True)

    def base64(self) -> StringSchema:
        """Require base64 (RFC 4648). The empty string is valid base64,
        combine with ``non_empty()`` where needed.
        """
        return self._configure(base64=True)

    def alpha(self, locale: str = "en-US") -> StringSchema:
        """Require letters only, e.g. ``alpha("de-DE")`` to allow umlauts."""
        return self._configure(alpha=_locale_arg("alpha", locale, patterns.ALPHA))

    def alphanumeric(self, locale: str = "en-US") -> StringSchema:
        """Require letters and digits only."""
        return self._configure(
            alphanumeric=_locale_arg("alphanumeric", locale, patterns.ALPHANUMERIC)
        )

    def numeric(self) -> StringSchema:
        """Require ASCII digits only."""
        return self._configure(numeric=True)

    def postal(self, locale: str = "DE") -> StringSchema:
        """Require a postal code of the given country."""
        return self._configure(postal=_locale_arg("postal", locale, patterns.POSTAL))

    def iso31661_alpha2(self) -> StringSchema:
        """Require an ISO 3166-1 alpha-2 country code."""
        return self._configure(iso31661_alpha2=True)

    def iban(self, locale: str = "DE") -> StringSchema:
        """Require an IBAN of the given country."""
        return self._configure(iban=_locale_arg("iban", locale, patterns.IBAN))

    def bic(self) -> StringSchema:
        return self._configure(bic=True)

    def ip(self, version: int = 4) -> StringSchema:
        """Require an IPv4 or IPv6 address."""
        if isinstance(version, bool) or version not in patterns.IP_VERSIONS:
            raise ConstraintError("StringSchema", "ip", version, "must be 4 or 6")
        return self._configure(ip=version)

    # -- transforms --------------------------------------------------------

    def transform(self, fn: TransformFn) -> StringSchema:
        """Add a custom str -> str transform.

        Transforms run right after the type check/coercion and before every
        constraint. A transform that does not return a string raises
        :class:`TransformError` during validation.

        Raises:
            ConstraintError: If ``fn`` is not callable
        """
        if not callable(fn):
            raise ConstraintError(
                "StringSchema", "transform", fn, "parameter must be a function"
            )
        name = getattr(fn, "__name__", "transform")
        return self._add_transform(Transform(name, fn))

    def trim(self) -> StringSchema:
        return self._builtin("trim")

    def to_lower_case(self) -> StringSchema:
        return self._builtin("to_lower_case")

    def to_upper_case(self) -> StringSchema:
        return self._builtin("to_upper_case")

    def capitalized(self) -> StringSchema:
        """Upper-case the first character and lower-case the rest."""
        return self._builtin("capitalized")

    def _builtin(self, name: str) -> StringSchema:
        return self._add_transform(Transform(name, BUILTIN_TRANSFORMS[name], builtin=True))

    def _add_transform(self, transform: Transform) -> StringSchema:
        return self._configure(transforms=self._config.transforms + (transform,))

    # -- validation --------------------------------------------------------

    def _check(self, value: Any, config: StringConstraints) -> ValidationResult:
        given = value
        if config.coerce:
            value = to_text(value)
            if value == OBJECT_MARKER and not isinstance(given, str):
                return ValidationResult.failure("must be a string, given was an object")

        if not isinstance(value, str):
            return ValidationResult.failure(
                f"must be a string, given was {describe_type(given)}"
            )

        for transform in config.transforms:
            value = transform.apply(value)

        error = _first_violation(value, config, given)
        if error:
            return ValidationResult.failure(error)
        return ValidationResult.success(value)

    def _config_dict(self, config: StringConstraints) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for flag in ("coerce", "email", "base64", "numeric", "iso31661_alpha2", "bic"):
            if getattr(config, flag):
                data[flag] = True
        for option in (
            "min", "max", "length", "starts_with", "ends_with",
            "alpha", "alphanumeric", "postal", "iban", "ip",
        ):
            setting = getattr(config, option)
            if setting is not None:
                data[option] = setting
        transforms = []
        for transform in config.transforms:
            if transform.builtin:
                transforms.append(transform.name)
            else:
                logger.warning(f"Custom transform '{transform.name}' cannot be represented, omitting it")
        if transforms:
            data["transforms"] = transforms
        return data


def _first_violation(value: str, config: StringConstraints, given: Any) -> str | None:
    """Return the message of the first failing constraint, or None."""
    size = len(value)
    if config.min is not None and size < config.min:
        return f"must be a string with {config.min} or more characters, given was a length of {size}"
    if config.max is not None and size > config.max:
        return f"must be a string with {config.max} or fewer characters, given was a length of {size}"
    if config.length is not None and size != config.length:
        return f"must be a string with exactly {config.length} characters, given was a length of {size}"

    prefix = config.starts_with
    if prefix and not value.startswith(prefix):
        return (
            f'must be a string that starts with "{prefix}". '
            f'String started with "{value[:len(prefix)]}"'
        )
    suffix = config.ends_with
    if suffix and not value.endswith(suffix):
        return (
            f'must be a string that ends with "{suffix}". '
            f'String ended with "{value[-len(suffix):]}"'
        )

    if config.email and not patterns.EMAIL.fullmatch(value):
        return f"must be a valid email address, given was {given!r}"
    if config.base64 and not patterns.BASE64.fullmatch(value):
        return "must be a valid base64 string"
    if config.alpha and not patterns.ALPHA[config.alpha].fullmatch(value):
        return f"must be an alphabetic string, given was {given!r}"
    if config.alphanumeric and not patterns.ALPHANUMERIC[config.alphanumeric].fullmatch(value):
        return f"must be an alphanumeric string, given was {given!r}"
    if config.numeric and not patterns.NUMERIC.fullmatch(value):
        return f"must be a numerical string, given was {given!r}"
    if config.postal and not patterns.POSTAL[config.postal].fullmatch(value):
        return f"must be a valid postal code, given was {given!r}"
    if config.iso31661_alpha2 and value not in patterns.COUNTRY_CODES:
        return f"must be a valid ISO 3166-1 alpha-2 country code, given was {given!r}"
    if config.iban and not patterns.IBAN[config.iban].fullmatch(value):
        return f"must be a valid {config.iban}-IBAN, given was {given!r}"
    if config.bic and not patterns.BIC.fullmatch(value):
        return f"must be a valid BIC, given was {given!r}"
    if config.ip and not patterns.IP_VERSIONS[config.ip].fullmatch(value):
        return f"must be a valid IPv{config.ip} address, given was {given!r}"
    return None


def _length_arg(constraint: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise ConstraintError("StringSchema", constraint, value, "parameter is not a number")
    return value  # type: ignore[return-value]


def _text_arg(constraint: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConstraintError("StringSchema", constraint, value, "parameter is not a string")
    return value


def _locale_arg(constraint: str, locale: Any, table: Mapping[str, Any]) -> str:
    if not isinstance(locale, str) or locale not in table:
        raise UnknownLocaleError("StringSchema", constraint, locale, sorted(table))
    return locale
