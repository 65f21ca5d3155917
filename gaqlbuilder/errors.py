"""Custom exception hierarchy for gaqlbuilder.

All public errors inherit from GaqlError so callers can catch the base
class for any gaqlbuilder-specific failure.  The three categories a caller
is expected to branch on are:

* :class:`ValidationError`: malformed input (bad identifier, operator,
  date, direction, empty list, missing required clause).
* :class:`SecurityError`: input rejected as an injection or ReDoS risk.
* :class:`QueryLimitError`: a count or length ceiling was exceeded.

Every message ends with ``Expected: <constraint>, Received: <value>``.
"""
from __future__ import annotations

from typing import Any


def describe(summary: str, expected: str, received: str) -> str:
    """Return ``"<summary>. Expected: <expected>, Received: <received>"``."""
    return f"{summary}. Expected: {expected}, Received: {received}"


class GaqlError(Exception):
    """Base exception for all gaqlbuilder errors.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. ``INVALID_FIELD_NAME``).
        expected: The constraint the input had to satisfy.
        received: The offending input, as shown in the message.
        details: Extra structured context.
    """

    def __init__(
        self,
        message: str,
        code: str = "GAQL_ERROR",
        expected: str | None = None,
        received: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.expected = expected
        self.received = received
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for API callers."""
        return {
            "error": self.code,
            "message": str(self),
            "expected": self.expected,
            "received": self.received,
            "details": self.details,
        }


class ValidationError(GaqlError):
    """Raised when caller input is malformed.

    Args:
        summary: Short description of what is wrong.
        expected: The constraint the input had to satisfy.
        received: The offending input, already formatted for display.
        code: Machine-readable error code.
        details: Extra structured context.
    """

    def __init__(
        self,
        summary: str,
        expected: str,
        received: str,
        code: str = "INVALID_INPUT",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            describe(summary, expected, received),
            code=code,
            expected=expected,
            received=received,
            details=details,
        )


def _quoted(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return repr(value)


class InvalidFieldNameError(ValidationError):
    """Raised when a field name is neither an identifier nor an aggregate."""

    def __init__(self, field: Any) -> None:
        super().__init__(
            "Invalid field name",
            expected="alphanumeric with dots/underscores or aggregate function",
            received=_quoted(field),
            code="INVALID_FIELD_NAME",
            details={"field": field},
        )


class InvalidResourceNameError(ValidationError):
    """Raised when a resource name is not a single-segment identifier."""

    def __init__(self, resource: Any) -> None:
        super().__init__(
            "Invalid resource name",
            expected="alphanumeric with underscores only",
            received=_quoted(resource),
            code="INVALID_RESOURCE_NAME",
            details={"resource": resource},
        )


class InvalidParameterNameError(ValidationError):
    """Raised when an engine parameter name is not a plain identifier."""

    def __init__(self, name: Any) -> None:
        super().__init__(
            "Invalid parameter name",
            expected="alphanumeric with underscores only",
            received=_quoted(name),
            code="INVALID_PARAMETER_NAME",
            details={"parameter": name},
        )


class InvalidOperatorError(ValidationError):
    """Raised when a comparison operator is outside the fixed set."""

    def __init__(self, operator: Any, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid operator: {operator}",
            expected=f"one of {', '.join(allowed)}",
            received=_quoted(operator),
            code="INVALID_OPERATOR",
            details={"operator": operator, "allowed_operators": allowed},
        )


class InvalidDateRangeError(ValidationError):
    """Raised when a DURING value is neither a known range nor a real date."""

    def __init__(self, value: Any, allowed: list[str]) -> None:
        super().__init__(
            "Invalid date range",
            expected=f"one of {', '.join(allowed)}, or date in YYYY-MM-DD format",
            received=_quoted(value),
            code="INVALID_DATE_RANGE",
            details={"date_range": value, "allowed_ranges": allowed},
        )


class InvalidDirectionError(ValidationError):
    """Raised when an ORDER BY direction is not ASC or DESC."""

    def __init__(self, direction: Any) -> None:
        super().__init__(
            "ORDER BY direction invalid",
            expected="ASC or DESC",
            received=_quoted(direction),
            code="INVALID_DIRECTION",
            details={"direction": direction},
        )


class InvalidValueError(ValidationError):
    """Raised when a condition value is not a string, number, boolean or None."""

    def __init__(
        self,
        value: Any,
        reason: str = "Invalid literal value",
        received: str | None = None,
    ) -> None:
        super().__init__(
            reason,
            expected="string, finite number, boolean or None",
            received=received or f"{type(value).__name__} {value!r}",
            code="INVALID_VALUE",
            details={"value_type": type(value).__name__},
        )


class EmptyClauseError(ValidationError):
    """Raised when a clause that needs at least one entry receives none.

    Args:
        clause: Clause label (e.g. ``"IN"``, ``"GROUP BY"``).
        noun: What the clause needed (``"value"``, ``"field"``, ...).
        expected: The expected shape (``"non-empty array"``, ...).
        received: Description of what was received.
    """

    def __init__(
        self,
        clause: str,
        noun: str,
        expected: str = "non-empty array",
        received: str = "empty array",
    ) -> None:
        super().__init__(
            f"{clause} clause requires at least one {noun}",
            expected=expected,
            received=received,
            code="EMPTY_CLAUSE",
            details={"clause": clause},
        )


class QueryBuildError(ValidationError):
    """Raised at render time when a required clause is missing.

    Args:
        clause: The missing clause (``"SELECT"`` or ``"FROM"``).
        expected: What the clause needed.
        received: What the builder holds instead.
    """

    def __init__(self, clause: str, expected: str, received: str) -> None:
        super().__init__(
            f"{clause} clause is required",
            expected=expected,
            received=received,
            code="MISSING_CLAUSE",
            details={"clause": clause},
        )


class SecurityError(GaqlError):
    """Raised when input is rejected as an injection or ReDoS risk.

    Args:
        summary: Short description of the violation.
        expected: The constraint the input had to satisfy.
        received: Description of the offending input.
        code: Machine-readable error code.
        details: Extra structured context.
    """

    def __init__(
        self,
        summary: str,
        expected: str,
        received: str,
        code: str = "SECURITY_VIOLATION",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            describe(summary, expected, received),
            code=code,
            expected=expected,
            received=received,
            details=details,
        )


class QueryLimitError(GaqlError):
    """Raised when a count or length ceiling is exceeded.

    Args:
        clause: Clause label the ceiling applies to (``"SELECT"``, ``"Query"``).
        unit: Singular noun being counted (``"field"``, ``"character"``).
        limit: The configured ceiling.
        count: The count that triggered the error.
        summary: Optional override for the leading sentence.
    """

    def __init__(
        self,
        clause: str,
        unit: str,
        limit: int,
        count: int,
        summary: str | None = None,
    ) -> None:
        expected = f"<= {limit} {unit}s"
        received = f"{count} {unit}s"
        super().__init__(
            describe(
                summary or f"{clause} clause exceeds maximum {unit} limit",
                expected,
                received,
            ),
            code="QUERY_LIMIT_EXCEEDED",
            expected=expected,
            received=received,
            details={"clause": clause, "limit": limit, "count": count},
        )
        self.clause = clause
        self.limit = limit
        self.count = count


class ParseError(GaqlError):
    """Raised when a declarative query cannot be parsed into a QuerySpec.

    Args:
        message: Human-readable description.
        raw: The raw input that failed to parse.
    """

    def __init__(self, message: str, raw: Any = None) -> None:
        super().__init__(message, code="PARSE_ERROR")
        self.raw = raw
