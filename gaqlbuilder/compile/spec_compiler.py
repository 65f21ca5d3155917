"""Declarative QuerySpec → GAQL compilation.

``SpecCompiler`` replays a :class:`~gaqlbuilder.schema.query_spec.QuerySpec`
onto a fresh :class:`~gaqlbuilder.compile.builder.QueryBuilder`, so every
identifier, literal, pattern and ceiling check of the fluent API applies
unchanged.  Conditions are applied in list order; the first failing one
aborts compilation.
"""
from __future__ import annotations

from collections.abc import Callable

from gaqlbuilder.compile.builder import QueryBuilder
from gaqlbuilder.schema.limits import QueryLimits
from gaqlbuilder.schema.query_spec import ConditionSpec, QuerySpec

_ConditionHandler = Callable[[QueryBuilder, ConditionSpec], QueryBuilder]

# ---------------------------------------------------------------------------
# Operator dispatch
# ---------------------------------------------------------------------------


def _comparison(b: QueryBuilder, c: ConditionSpec) -> QueryBuilder:
    return b.where(c.field, c.op, c.value)


_HANDLERS: dict[str, _ConditionHandler] = {
    "=": _comparison,
    "!=": _comparison,
    ">": _comparison,
    ">=": _comparison,
    "<": _comparison,
    "<=": _comparison,
    "IN": lambda b, c: b.where_in(c.field, c.values),
    "NOT_IN": lambda b, c: b.where_not_in(c.field, c.values),
    "LIKE": lambda b, c: b.where_like(c.field, c.pattern),
    "NOT_LIKE": lambda b, c: b.where_not_like(c.field, c.pattern),
    "REGEXP_MATCH": lambda b, c: b.where_regexp_match(c.field, c.pattern),
    "NOT_REGEXP_MATCH": lambda b, c: b.where_not_regexp_match(c.field, c.pattern),
    "IS_NULL": lambda b, c: b.where_null(c.field),
    "IS_NOT_NULL": lambda b, c: b.where_not_null(c.field),
    "BETWEEN": lambda b, c: b.where_between(c.field, c.low, c.high),
    "CONTAINS_ALL": lambda b, c: b.where_contains_all(c.field, c.values),
    "CONTAINS_ANY": lambda b, c: b.where_contains_any(c.field, c.values),
    "CONTAINS_NONE": lambda b, c: b.where_contains_none(c.field, c.values),
    "DURING": lambda b, c: b.where_during(c.field, c.date_range),
}


class SpecCompiler:
    """Compiles a :class:`QuerySpec` to a GAQL string.

    Args:
        limits: Ceilings applied to every compiled query; defaults to
            ``QueryLimits()``.
    """

    def __init__(self, limits: QueryLimits | None = None) -> None:
        self._limits = limits

    def compile(self, spec: QuerySpec) -> str:
        """Replay ``spec`` onto a new builder and render it.

        Raises:
            ValidationError: (or subclass) for malformed identifiers or values.
            SecurityError: For unsafe patterns or parameter values.
            QueryLimitError: If any ceiling is exceeded.
        """
        builder = QueryBuilder(self._limits)
        builder.select(spec.select).from_(spec.from_)
        for condition in spec.where:
            _HANDLERS[condition.op](builder, condition)
        if spec.group_by:
            builder.group_by(spec.group_by)
        for term in spec.order_by:
            builder.order_by(term.field, term.direction)
        if spec.limit is not None:
            builder.limit(spec.limit)
        if spec.parameters:
            builder.parameters(spec.parameters)
        return builder.build()
