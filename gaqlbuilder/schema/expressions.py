"""Constants and enums for the GAQL condition vocabulary.

Conditions are rendered to text as soon as they are added, so the builder
never stores operator objects.  This module defines the fixed token sets
that the validators check against and the renderers emit.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Condition operator enums
# ---------------------------------------------------------------------------


class ComparisonOp(str, Enum):
    """Binary comparison operators (field, scalar value)."""

    EQ = "="
    NE = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="


class MembershipOp(str, Enum):
    """Membership operators (field, non-empty value list)."""

    IN = "IN"
    NOT_IN = "NOT IN"


class ContainsOp(str, Enum):
    """Containment operators for repeated fields (field, non-empty value list)."""

    CONTAINS_ALL = "CONTAINS ALL"
    CONTAINS_ANY = "CONTAINS ANY"
    CONTAINS_NONE = "CONTAINS NONE"


class PatternOp(str, Enum):
    """Pattern-match operators (field, safety-checked pattern)."""

    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    REGEXP_MATCH = "REGEXP_MATCH"
    NOT_REGEXP_MATCH = "NOT REGEXP_MATCH"


class NullOp(str, Enum):
    """Null-check operators (field only)."""

    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"


class SortDirection(str, Enum):
    """ORDER BY directions."""

    ASC = "ASC"
    DESC = "DESC"


class DateRange(str, Enum):
    """Relative date ranges accepted by ``DURING``."""

    TODAY = "TODAY"
    YESTERDAY = "YESTERDAY"
    LAST_7_DAYS = "LAST_7_DAYS"
    LAST_14_DAYS = "LAST_14_DAYS"
    LAST_30_DAYS = "LAST_30_DAYS"
    LAST_BUSINESS_WEEK = "LAST_BUSINESS_WEEK"
    LAST_WEEK_SUN_SAT = "LAST_WEEK_SUN_SAT"
    LAST_WEEK_MON_SUN = "LAST_WEEK_MON_SUN"
    THIS_MONTH = "THIS_MONTH"
    LAST_MONTH = "LAST_MONTH"
    ALL_TIME = "ALL_TIME"


# ---------------------------------------------------------------------------
# Token groups (keep ordered lists for messages, frozensets for lookups)
# ---------------------------------------------------------------------------

#: Comparison operators in declaration order (used in error messages).
VALID_OPERATORS: list[str] = [op.value for op in ComparisonOp]

#: O(1) membership set for :data:`VALID_OPERATORS`.
COMPARISON_OPS: frozenset[str] = frozenset(VALID_OPERATORS)

#: Relative date ranges in declaration order (used in error messages).
VALID_DATE_RANGES: list[str] = [r.value for r in DateRange]

#: O(1) membership set for :data:`VALID_DATE_RANGES`.
RELATIVE_DATE_RANGES: frozenset[str] = frozenset(VALID_DATE_RANGES)

#: Sort directions.
SORT_DIRECTIONS: frozenset[str] = frozenset(d.value for d in SortDirection)

# ---------------------------------------------------------------------------
# Function groups
# ---------------------------------------------------------------------------

#: Aggregate functions that may wrap a single field in SELECT / ORDER BY.
AGGREGATE_FUNCTIONS: tuple[str, ...] = ("SUM", "COUNT", "AVG", "MIN", "MAX", "COUNT_DISTINCT")

#: Conjunction joining WHERE conditions.  GAQL has no OR.
CONDITION_CONJUNCTION = " AND "
