"""gaqlbuilder – Safe, fluent construction of Google Ads Query Language queries.

Build Queries. Don't Concatenate Them.

Public API
----------
``QueryBuilder``
    Fluent builder: ``select`` / ``from_`` / ``where*`` / ``group_by`` /
    ``order_by`` / ``limit`` / ``parameters``, then ``build()``.

``build_query``
    Parse a declarative JSON query (``QuerySpec`` shape) and compile it to a
    GAQL string through the same builder.

Re-exported types
-----------------
``QueryLimits``, ``QuerySpec``, the vocabulary enums, and all error classes.

Example::

    from gaqlbuilder import QueryBuilder

    query = (
        QueryBuilder()
        .select(["campaign.id", "metrics.clicks"])
        .from_("campaign")
        .where_during("segments.date", "LAST_30_DAYS")
        .order_by("metrics.clicks", "DESC")
        .limit(10)
        .build()
    )
"""

from __future__ import annotations

import json
from typing import Any

from gaqlbuilder.compile.builder import QueryBuilder
from gaqlbuilder.compile.spec_compiler import SpecCompiler
from gaqlbuilder.errors import (
    EmptyClauseError,
    GaqlError,
    InvalidDateRangeError,
    InvalidDirectionError,
    InvalidFieldNameError,
    InvalidOperatorError,
    InvalidParameterNameError,
    InvalidResourceNameError,
    InvalidValueError,
    ParseError,
    QueryBuildError,
    QueryLimitError,
    SecurityError,
    ValidationError,
)
from gaqlbuilder.schema.expressions import (
    ComparisonOp,
    ContainsOp,
    DateRange,
    MembershipOp,
    NullOp,
    PatternOp,
    SortDirection,
)
from gaqlbuilder.schema.limits import DEFAULT_LIMITS, QueryLimits
from gaqlbuilder.schema.query_spec import ConditionSpec, OrderSpec, QuerySpec

__all__ = [
    # Core
    "QueryBuilder",
    "build_query",
    "SpecCompiler",
    # Configuration
    "QueryLimits",
    "DEFAULT_LIMITS",
    # Declarative models
    "QuerySpec",
    "ConditionSpec",
    "OrderSpec",
    # Vocabulary
    "ComparisonOp",
    "MembershipOp",
    "ContainsOp",
    "PatternOp",
    "NullOp",
    "SortDirection",
    "DateRange",
    # Errors
    "GaqlError",
    "ValidationError",
    "InvalidFieldNameError",
    "InvalidResourceNameError",
    "InvalidParameterNameError",
    "InvalidOperatorError",
    "InvalidDateRangeError",
    "InvalidDirectionError",
    "InvalidValueError",
    "EmptyClauseError",
    "QueryBuildError",
    "SecurityError",
    "QueryLimitError",
    "ParseError",
]


def build_query(spec_json: str | dict[str, Any], limits: QueryLimits | None = None) -> str:
    """Parse, validate and compile a declarative query to GAQL.

    Example::

        query = gaqlbuilder.build_query(
            '{"select": ["campaign.id"], "from": "campaign", "limit": 5}'
        )
        # "SELECT campaign.id FROM campaign LIMIT 5"

    Args:
        spec_json: JSON string, or an already-decoded dict, in ``QuerySpec`` shape.
        limits: Optional ceilings; defaults to ``QueryLimits()``.

    Returns:
        The rendered GAQL string.

    Raises:
        ParseError: If ``spec_json`` is not valid JSON or not a valid QuerySpec.
        ValidationError: (or subclass) for malformed identifiers or values.
        SecurityError: For unsafe patterns or parameter values.
        QueryLimitError: If any ceiling is exceeded.
    """
    # 1. Parse
    if isinstance(spec_json, str):
        try:
            raw = json.loads(spec_json)
        # JSONDecodeError, or an integer too long to parse.
        except ValueError as exc:
            raise ParseError(f"Invalid JSON: {exc}", raw=spec_json) from exc
    else:
        raw = spec_json

    try:
        spec = QuerySpec.model_validate(raw)
    except Exception as exc:
        raise ParseError(f"QuerySpec structure is invalid: {exc}", raw=spec_json) from exc

    # 2. Compile
    return SpecCompiler(limits).compile(spec)
