"""Literal, pattern and parameter formatting.

Formatters with deliberately different rules:

``format_literal``
    Typed condition values.  Strings are single-quoted with embedded quotes
    doubled (GAQL has no backslash escapes); booleans become ``TRUE`` /
    ``FALSE``; ``None`` becomes ``NULL``; numbers use their decimal form.

``format_pattern``
    Raw LIKE / REGEXP_MATCH text that already sits inside a fixed quoted
    literal.  Only the quote is doubled.

``format_parameter_value``
    PARAMETERS values.  Only booleans (lowercase) and finite numbers are
    accepted; strings are rejected outright instead of being escaped.

``format_date_range``
    DURING values: relative tokens bare, absolute dates quoted.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from gaqlbuilder.errors import InvalidValueError, SecurityError
from gaqlbuilder.validate.dates import is_relative_date_range

logger = logging.getLogger(__name__)

_QUOTE = "'"
_ESCAPED_QUOTE = "''"


#: Widest integer literal rendered (CPython's default int-to-str cap).
MAX_INT_DIGITS = 4300
_INT_CEILING = 10**MAX_INT_DIGITS


def _format_number(value: int | float) -> str:
    if isinstance(value, float):
        # Shortest round-trip digits, positional notation (no exponent).
        return format(Decimal(repr(value)), "f")
    return str(value)


def _int_too_large(value: Any) -> bool:
    return isinstance(value, int) and abs(value) >= _INT_CEILING


def format_literal(value: Any) -> str:
    """Render a condition value as a GAQL literal.

    Raises:
        InvalidValueError: For non-finite floats, integers wider than
            ``MAX_INT_DIGITS`` digits, or unsupported types.
    """
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return f"{_QUOTE}{value.replace(_QUOTE, _ESCAPED_QUOTE)}{_QUOTE}"
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidValueError(value, reason="Invalid literal value: non-finite number")
    if _int_too_large(value):
        raise InvalidValueError(
            value,
            reason="Invalid literal value: integer too large",
            received=f"int with {value.bit_length()} bits",
        )
    if isinstance(value, (int, float)):
        return _format_number(value)
    raise InvalidValueError(value)


def format_literal_list(values: Iterable[Any]) -> str:
    """Format every element and join with ``", "``.

    All elements are formatted before anything is returned, so one bad
    element fails the whole list.
    """
    return ", ".join([format_literal(v) for v in values])


def format_pattern(pattern: str) -> str:
    """Double single quotes in a pattern body; nothing else is touched."""
    return pattern.replace(_QUOTE, _ESCAPED_QUOTE)


def format_parameter_value(name: str, value: Any) -> str:
    """Render a PARAMETERS value.

    Args:
        name: Parameter name (used in the error message only).
        value: Boolean or finite number.

    Raises:
        SecurityError: For any other type, for NaN / infinity, or for an
            integer wider than ``MAX_INT_DIGITS`` digits.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            logger.warning("Rejected non-finite value for parameter %s", name)
            raise SecurityError(
                f"Invalid parameter value for '{name}'",
                expected="finite number",
                received=repr(value),
                code="INVALID_PARAMETER_VALUE",
                details={"parameter": name},
            )
        if _int_too_large(value):
            logger.warning("Rejected oversized integer for parameter %s", name)
            raise SecurityError(
                f"Invalid parameter value for '{name}'",
                expected=f"integer with at most {MAX_INT_DIGITS} digits",
                received=f"int with {value.bit_length()} bits",
                code="INVALID_PARAMETER_VALUE",
                details={"parameter": name},
            )
        return _format_number(value)
    logger.warning(
        "Rejected %s value for parameter %s", type(value).__name__, name
    )
    raise SecurityError(
        f"Invalid parameter value type for '{name}'",
        expected="boolean or number",
        received=_type_label(value),
        code="INVALID_PARAMETER_TYPE",
        details={"parameter": name, "value_type": type(value).__name__},
    )


def _type_label(value: Any) -> str:
    if isinstance(value, str):
        return "string"
    if value is None:
        return "None"
    return type(value).__name__


def format_date_range(value: str) -> str:
    """Render a validated ``DURING`` value.

    Relative tokens (``LAST_7_DAYS``) are keywords and render bare; absolute
    ``YYYY-MM-DD`` dates render as quoted literals.
    """
    if is_relative_date_range(value):
        return value
    return format_literal(value)
