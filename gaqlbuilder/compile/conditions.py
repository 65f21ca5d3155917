"""WHERE condition fragment builder.

``ConditionBuilder`` turns one condition call into one finished fragment
such as ``campaign.status IN ('ENABLED', 'PAUSED')``.  Fragments are never
re-parsed: each method validates every input, formats every value, and
returns text that is already safe to join into the WHERE clause.

Check order inside each method:

1. field name,
2. operator / pattern / date token,
3. list shape (non-empty, then the array ceiling),
4. value formatting.

Nothing here mutates builder state; the caller appends the returned
fragment only after its own ceiling check passes.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from gaqlbuilder.compile.formatting import (
    format_date_range,
    format_literal,
    format_literal_list,
    format_pattern,
)
from gaqlbuilder.errors import EmptyClauseError, InvalidOperatorError, ValidationError
from gaqlbuilder.schema.expressions import (
    COMPARISON_OPS,
    VALID_OPERATORS,
    ComparisonOp,
    ContainsOp,
    MembershipOp,
    NullOp,
    PatternOp,
)
from gaqlbuilder.validate.dates import validate_date_range
from gaqlbuilder.validate.limits import LimitEnforcer
from gaqlbuilder.validate.names import validate_field_name
from gaqlbuilder.validate.patterns import validate_pattern


class ConditionBuilder:
    """Validates and renders single WHERE conditions.

    Args:
        enforcer: Limit enforcer used for array sizes and pattern ceilings.
    """

    def __init__(self, enforcer: LimitEnforcer) -> None:
        self._enforcer = enforcer

    # ------------------------------------------------------------------
    # Scalar conditions
    # ------------------------------------------------------------------

    def comparison(self, field: str, operator: str, value: Any) -> str:
        """``field <op> literal`` for ``op`` in ``= != > >= < <=``."""
        validate_field_name(field)
        op = operator.value if isinstance(operator, ComparisonOp) else operator
        if not isinstance(op, str) or op not in COMPARISON_OPS:
            raise InvalidOperatorError(operator, VALID_OPERATORS)
        return f"{field} {op} {format_literal(value)}"

    def between(self, field: str, low: Any, high: Any) -> str:
        """``field BETWEEN low AND high``."""
        validate_field_name(field)
        return f"{field} BETWEEN {format_literal(low)} AND {format_literal(high)}"

    def null_check(self, field: str, op: NullOp | str) -> str:
        """``field IS NULL`` / ``field IS NOT NULL``."""
        validate_field_name(field)
        return f"{field} {NullOp(op).value}"

    def during(self, field: str, date_range: str) -> str:
        """``field DURING RANGE`` (relative) or ``field DURING 'YYYY-MM-DD'``."""
        validate_field_name(field)
        validate_date_range(date_range)
        return f"{field} DURING {format_date_range(date_range)}"

    # ------------------------------------------------------------------
    # Pattern conditions
    # ------------------------------------------------------------------

    def pattern(self, field: str, op: PatternOp | str, pattern: str) -> str:
        """``field LIKE 'pattern'`` and the NOT / REGEXP_MATCH variants.

        Raises:
            SecurityError: If ``pattern`` fails the ReDoS checks.
        """
        validate_field_name(field)
        keyword = PatternOp(op).value
        validate_pattern(pattern, self._enforcer.limits)
        return f"{field} {keyword} '{format_pattern(pattern)}'"

    # ------------------------------------------------------------------
    # List conditions
    # ------------------------------------------------------------------

    def membership(self, field: str, op: MembershipOp | str, values: Iterable[Any]) -> str:
        """``field IN (v1, v2, ...)`` / ``field NOT IN (...)``."""
        validate_field_name(field)
        keyword = MembershipOp(op).value
        return self._list_condition(field, keyword, values)

    def containment(self, field: str, op: ContainsOp | str, values: Iterable[Any]) -> str:
        """``field CONTAINS ALL|ANY|NONE (v1, v2, ...)``."""
        validate_field_name(field)
        keyword = ContainsOp(op).value
        return self._list_condition(field, keyword, values)

    def _list_condition(self, field: str, keyword: str, values: Iterable[Any]) -> str:
        items = _as_value_list(keyword, values)
        if not items:
            raise EmptyClauseError(
                keyword, "value", received=f"empty array for {field}"
            )
        self._enforcer.check_array_values(keyword, len(items))
        return f"{field} {keyword} ({format_literal_list(items)})"


def _as_value_list(keyword: str, values: Any) -> list[Any]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ValidationError(
            f"{keyword} clause requires a list of values",
            expected="list or tuple of values",
            received=type(values).__name__,
            code="INVALID_VALUE",
        )
    return list(values)
