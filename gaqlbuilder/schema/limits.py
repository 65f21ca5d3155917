"""Pydantic model for the query size ceilings.

The defaults guard against memory exhaustion and oversized requests.  Pass
a customised instance to :class:`~gaqlbuilder.compile.builder.QueryBuilder`
to tighten (or loosen) them for a given caller::

    from gaqlbuilder import QueryBuilder, QueryLimits

    builder = QueryBuilder(limits=QueryLimits(max_where_conditions=20))
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QueryLimits(BaseModel):
    """Ceilings checked by the :class:`~gaqlbuilder.validate.limits.LimitEnforcer`.

    Attributes:
        max_select_fields: Maximum number of selected fields.
        max_where_conditions: Maximum number of WHERE conditions.
        max_array_values: Maximum elements in one IN / CONTAINS list.
        max_group_by_fields: Maximum number of GROUP BY keys.
        max_order_by_fields: Maximum number of ORDER BY keys.
        max_parameters: Maximum number of PARAMETERS entries.
        max_query_length: Maximum rendered query length in characters.
        max_pattern_length: Maximum LIKE / REGEXP_MATCH pattern length.
        max_pattern_depth: Maximum parenthesis nesting inside a pattern.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_select_fields: int = Field(default=500, gt=0)
    max_where_conditions: int = Field(default=100, gt=0)
    max_array_values: int = Field(default=1000, gt=0)
    max_group_by_fields: int = Field(default=10, gt=0)
    max_order_by_fields: int = Field(default=10, gt=0)
    max_parameters: int = Field(default=50, gt=0)
    max_query_length: int = Field(default=100_000, gt=0)
    max_pattern_length: int = Field(default=1000, gt=0)
    max_pattern_depth: int = Field(default=50, gt=0)


#: Shared default instance (the model is frozen, so sharing is safe).
DEFAULT_LIMITS = QueryLimits()
