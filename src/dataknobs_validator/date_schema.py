"""Date schema with range checks and random fallback generation.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any

from .base import Schema
from .coercion import parse_date_literal, to_datetime
from .exceptions import ConstraintError
from .result import ValidationResult

logger = logging.getLogger(__name__)

GENERATION_WINDOW = timedelta(days=365)


@dataclass(frozen=True)
class DateConstraints:
    """Constraint settings of a DateSchema; None means unset."""

    coerce: bool = True
    before: datetime | None = None
    after: datetime | None = None
    populate: bool = False
    rng: random.Random | None = None


class DateSchema(Schema[DateConstraints]):
    """Schema for dates.

    Input is converted to a timezone-aware UTC ``datetime`` (from a
    ``datetime``, a ``date``, epoch milliseconds or a date string) and that
    ``datetime`` is the validated value. ``raw()`` keeps the original input as
    the value instead.

    Example:
        ```python
        schema = v.date().after("2023-01-01").before("2024-01-01")
        schema.validate("2023-12-31")
        # ValidationResult(valid=True, value=datetime(2023, 12, 31, tzinfo=utc), errors=[])
        ```
    """

    kind = "date"

    def __init__(self) -> None:
        super().__init__(DateConstraints())

    def raw(self) -> DateSchema:
        """Return the input unchanged when it passes validation.

        E.g. ``"2011-09-17"`` is checked as a date but stays a string.
        """
        return self._configure(coerce=False)

    def before(self, value: date | datetime | str) -> DateSchema:
        """Require dates strictly earlier than ``value``.

        Args:
            value: A ``date``/``datetime`` or a ``YYYY-MM-DD`` string
        """
        return self._configure(before=_bound_arg("before", value))

    def after(self, value: date | datetime | str) -> DateSchema:
        """Require dates strictly later than ``value``.

        Args:
            value: A ``date``/``datetime`` or a ``YYYY-MM-DD`` string
        """
        return self._configure(after=_bound_arg("after", value))

    def populate(self, rng: random.Random | None = None) -> DateSchema:
        """Replace input that is not a date with a random date.

        The date is drawn uniformly from a window derived from the bounds:

        - ``after`` and ``before``: exactly that window
        - only ``before``: the year before it
        - only ``after``: the year after it
        - neither: the last 365 days

        A valid date outside the bounds still fails. Intended for optional or
        synthetic data, not for validating trusted input.

        Args:
            rng: Random source; the module-level generator is used by default
        """
        return self._configure(populate=True, rng=rng)

    enforce = populate

    def generation_window(self, now: datetime | None = None) -> tuple[datetime, datetime]:
        """Return the (start, end) window ``populate`` draws from."""
        config = self._config
        return _window(config, now or datetime.now(timezone.utc))

    def _check(self, value: Any, config: DateConstraints) -> ValidationResult:
        if value is None:
            return ValidationResult.failure("must be a valid date representation, given was None")

        moment = to_datetime(value)
        if moment is None:
            if config.populate:
                start, end = _window(config, datetime.now(timezone.utc))
                generated = _sample(start, end, config.rng)
                logger.debug(f"Generated fallback date {generated.isoformat()} for {value!r}")
                return ValidationResult.success(generated)
            return ValidationResult.failure(f"must be a valid date, given was {value!r}")

        shown = moment.isoformat() if config.coerce else repr(value)
        before, after = config.before, config.after
        if before is not None and after is not None:
            if not after < moment < before:
                return ValidationResult.failure(
                    f"must be between {after.isoformat()} and {before.isoformat()}, given was {shown}"
                )
        elif before is not None and not moment < before:
            return ValidationResult.failure(f"must be before {before.isoformat()}, given was {shown}")
        elif after is not None and not moment > after:
            return ValidationResult.failure(f"must be after {after.isoformat()}, given was {shown}")

        return ValidationResult.success(moment if config.coerce else value)

    def _config_dict(self, config: DateConstraints) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if not config.coerce:
            data["raw"] = True
        if config.before is not None:
            data["before"] = _bound_text(config.before)
        if config.after is not None:
            data["after"] = _bound_text(config.after)
        if config.populate:
            data["populate"] = True
        return data


def _window(config: DateConstraints, now: datetime) -> tuple[datetime, datetime]:
    before, after = config.before, config.after
    if before is not None and after is not None:
        return after, before
    if before is not None:
        return _shift(before, -GENERATION_WINDOW), before
    if after is not None:
        return after, _shift(after, GENERATION_WINDOW)
    return now - GENERATION_WINDOW, now


def _shift(moment: datetime, delta: timedelta) -> datetime:
    try:
        return moment + delta
    except OverflowError:
        limit = datetime.max if delta > timedelta(0) else datetime.min
        return limit.replace(tzinfo=timezone.utc)


def _sample(start: datetime, end: datetime, rng: random.Random | None) -> datetime:
    fraction = (rng or random).random()
    return start + (end - start) * fraction


def _bound_arg(constraint: str, value: Any) -> datetime:
    if isinstance(value, (date, datetime)):
        moment = to_datetime(value)
        if moment is None:
            raise ConstraintError("DateSchema", constraint, value, "parameter is out of range")
        return moment
    if isinstance(value, str):
        parsed = parse_date_literal(value)
        if parsed is not None:
            return parsed
        raise ConstraintError("DateSchema", constraint, value, "parameter must be a YYYY-MM-DD date")
    raise ConstraintError("DateSchema", constraint, value, "parameter must be a date or a YYYY-MM-DD string")


def _bound_text(value: datetime) -> str | datetime:
    # Only midnight bounds have a YYYY-MM-DD form
    if value.time() == datetime.min.time():
        return value.date().isoformat()
    return value
