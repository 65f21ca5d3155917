"""Mutable clause state owned by one :class:`~gaqlbuilder.compile.builder.QueryBuilder`.

Packages the per-clause collections into a single record so the clause
renderers receive one object instead of seven arguments.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from gaqlbuilder.schema.expressions import SortDirection
from gaqlbuilder.schema.values import ParameterValue


@dataclass(frozen=True)
class OrderTerm:
    """A single ORDER BY key.

    Attributes:
        field: Validated field name.
        direction: Sort direction.
    """

    field: str
    direction: SortDirection = SortDirection.ASC


@dataclass
class QueryState:
    """Accumulated builder state.

    Attributes:
        select_fields: Selected fields in insertion order (duplicates kept).
        resource: The FROM resource; ``None`` until set.
        conditions: Rendered WHERE fragments, joined with AND.
        group_by_fields: GROUP BY keys in insertion order.
        order_by: ORDER BY keys in insertion order.
        limit: Row cap; ``None`` until set.
        parameters: PARAMETERS entries; replaced wholesale.
    """

    select_fields: list[str] = field(default_factory=list)
    resource: str | None = None
    conditions: list[str] = field(default_factory=list)
    group_by_fields: list[str] = field(default_factory=list)
    order_by: list[OrderTerm] = field(default_factory=list)
    limit: int | None = None
    parameters: dict[str, ParameterValue] = field(default_factory=dict)
