"""Ceiling checks for builder collections and the rendered query.

Every ``check_*`` method receives the size a collection WOULD have once the
pending call is applied.  The builder calls them before mutating anything,
so a rejected call leaves the builder unchanged.
"""

from __future__ import annotations

from gaqlbuilder.errors import QueryLimitError
from gaqlbuilder.schema.limits import DEFAULT_LIMITS, QueryLimits


class LimitEnforcer:
    """Checks counts against a :class:`QueryLimits` instance.

    Args:
        limits: The ceilings to enforce; defaults to ``QueryLimits()``.
    """

    def __init__(self, limits: QueryLimits | None = None) -> None:
        self._limits = limits or DEFAULT_LIMITS

    @property
    def limits(self) -> QueryLimits:
        return self._limits

    # ------------------------------------------------------------------
    # Per-clause counts
    # ------------------------------------------------------------------

    def check_select_fields(self, count: int) -> None:
        self._check("SELECT", "field", count, self._limits.max_select_fields)

    def check_conditions(self, count: int) -> None:
        self._check("WHERE", "condition", count, self._limits.max_where_conditions)

    def check_array_values(self, clause: str, count: int) -> None:
        """Check the element count of one IN / NOT IN / CONTAINS list."""
        self._check(clause, "value", count, self._limits.max_array_values)

    def check_group_by_fields(self, count: int) -> None:
        self._check("GROUP BY", "field", count, self._limits.max_group_by_fields)

    def check_order_by_fields(self, count: int) -> None:
        self._check("ORDER BY", "field", count, self._limits.max_order_by_fields)

    def check_parameters(self, count: int) -> None:
        self._check("PARAMETERS", "parameter", count, self._limits.max_parameters)

    # ------------------------------------------------------------------
    # Whole-query length (render time only)
    # ------------------------------------------------------------------

    def check_query_length(self, length: int) -> None:
        limit = self._limits.max_query_length
        if length > limit:
            raise QueryLimitError(
                "Query",
                "character",
                limit,
                length,
                summary="Query exceeds maximum length limit",
            )

    @staticmethod
    def _check(clause: str, unit: str, count: int, limit: int) -> None:
        if count > limit:
            raise QueryLimitError(clause, unit, limit, count)
