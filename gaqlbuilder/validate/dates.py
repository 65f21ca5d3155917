"""Validation for ``DURING`` values.

A value is accepted when it is one of the relative range tokens in
:class:`~gaqlbuilder.schema.expressions.DateRange`, or an absolute
``YYYY-MM-DD`` date that exists on the calendar.
"""

from __future__ import annotations

import datetime
import re
from typing import Any

from gaqlbuilder.errors import InvalidDateRangeError
from gaqlbuilder.schema.expressions import RELATIVE_DATE_RANGES, VALID_DATE_RANGES

_ABSOLUTE_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def is_relative_date_range(value: Any) -> bool:
    """True when ``value`` is one of the relative range tokens."""
    return isinstance(value, str) and value in RELATIVE_DATE_RANGES


def is_valid_absolute_date(value: Any) -> bool:
    """True when ``value`` is ``YYYY-MM-DD`` and names a real calendar day.

    The three components are fed to :class:`datetime.date` and must come back
    unchanged, which rejects month 13, ``02-30``, ``04-31`` and ``02-29`` in
    non-leap years.
    """
    if not isinstance(value, str):
        return False
    match = _ABSOLUTE_DATE_RE.fullmatch(value)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        parsed = datetime.date(year, month, day)
    except ValueError:
        return False
    return (parsed.year, parsed.month, parsed.day) == (year, month, day)


def is_valid_date_or_range(value: Any) -> bool:
    """True for a relative range token or a valid absolute date."""
    return is_relative_date_range(value) or is_valid_absolute_date(value)


def validate_date_range(value: Any) -> str:
    """Return ``value`` unchanged or raise :class:`InvalidDateRangeError`."""
    if not is_valid_date_or_range(value):
        raise InvalidDateRangeError(value, VALID_DATE_RANGES)
    return value
