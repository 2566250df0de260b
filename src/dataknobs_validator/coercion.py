"""Best-effort conversions used by the schemas' ``coerce`` modes.

Unlike a plain ``str()``/``float()`` call, these helpers give the same answer
for equivalent inputs regardless of their Python spelling: ``1.0`` renders as
``"1"``, ``True`` as ``"true"``, and ``" 0x1F "`` converts to ``31``. None of
them raise for bad data; callers decide what a failed conversion means.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from numbers import Real
from typing import Any

from .sentinels import UNDEFINED

#: Returned by :func:`to_text` for values that have no textual form
OBJECT_MARKER = "[object Object]"

NAN = float("nan")

DATE_LITERAL = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$", re.ASCII)

# Tried in order after ISO 8601 parsing
DATE_FORMATS = [
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%d.%m.%Y",
    "%m/%d/%Y",
    "%d %B %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%a, %d %b %Y %H:%M:%S %Z",
]


def to_text(value: Any) -> str:
    """Render ``value`` as text.

    Mappings and objects without their own ``__str__`` have no meaningful
    textual form and render as :data:`OBJECT_MARKER`.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, int):
        return _int_text(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None or item is UNDEFINED else to_text(item) for item in value)
    if isinstance(value, Mapping):
        return OBJECT_MARKER
    if type(value).__str__ is object.__str__ and type(value).__repr__ is object.__repr__:
        return OBJECT_MARKER
    return str(value)


def _int_text(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # Beyond the interpreter's int string conversion limit
        return "Infinity" if value > 0 else "-Infinity"


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def is_number(value: Any) -> bool:
    """True for real numbers other than ``bool`` and NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def to_number(value: Any) -> int | float:
    """Convert ``value`` to a number, returning NaN when that is not possible.

    ``bool`` converts to 0/1 and ``None`` to 0. Strings are stripped first; an
    empty string is 0, and decimal, float, ``Infinity`` and ``0x``/``0o``/``0b``
    prefixed forms are understood.
    """
    if isinstance(value, bool):
        return 1 if value else 0
    if value is None:
        return 0
    if isinstance(value, Real):
        return value  # type: ignore[return-value]
    if isinstance(value, str):
        return _parse_number(value.strip())
    return NAN


def _parse_number(text: str) -> int | float:
    if not text:
        return 0
    sign = 1
    body = text
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if not body or not body.isascii() or body[0] in "+-":
        return NAN
    lowered = body.lower()
    if lowered == "infinity":
        return sign * math.inf
    if lowered in ("inf", "nan") or "_" in body:
        return NAN
    for prefix, base in (("0x", 16), ("0o", 8), ("0b", 2)):
        if lowered.startswith(prefix):
            if text[0] in "+-":
                return NAN
            try:
                return int(body[2:], base)
            except ValueError:
                return NAN
    try:
        return sign * int(body)
    except ValueError:
        pass
    try:
        return sign * float(body)
    except ValueError:
        return NAN


def to_datetime(value: Any) -> datetime | None:
    """Construct a timezone-aware UTC ``datetime`` from ``value``.

    Accepts ``datetime`` (naive values are read as UTC), ``date``, epoch
    milliseconds and date strings. Returns None when no date can be built.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        return _from_epoch_millis(value)
    if isinstance(value, str):
        return _parse_datetime(value.strip())
    return None


def _as_utc(value: datetime) -> datetime | None:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        return None


def _from_epoch_millis(value: Real) -> datetime | None:
    try:
        millis = float(value)
        if math.isnan(millis) or math.isinf(millis):
            return None
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_datetime(text: str) -> datetime | None:
    if not text:
        return None
    try:
        return _as_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return _as_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue
    return None


def parse_date_literal(text: str) -> datetime | None:
    """Parse a strict ``YYYY-MM-DD`` literal as UTC midnight, or return None."""
    if not DATE_LITERAL.fullmatch(text):
        return None
    try:
        parsed = date.fromisoformat(text)
    except ValueError:
        return None
    return datetime.combine(parsed, time(), tzinfo=timezone.utc)
