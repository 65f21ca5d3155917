"""Fluent GAQL query builder.

``QueryBuilder`` is the clause accumulator and the assembler.  Each fluent
call validates its inputs, checks the relevant ceiling, and only then
mutates the builder's :class:`~gaqlbuilder.compile.state.QueryState`;
a call that raises leaves the builder exactly as it was.

Sub-builder hierarchy
---------------------
QueryBuilder
  ├── ConditionBuilder         (conditions.py)      - WHERE fragments
  ├── LimitEnforcer            (validate/limits.py) - ceilings
  └── *ClauseBuilder           (clause_builders.py) - one per clause

Check order inside every mutating call
--------------------------------------
1. identifiers (field / resource / parameter names),
2. token vocabularies (operator, direction, date range) and pattern safety,
3. list-argument shape: emptiness, then the array-size ceiling,
4. literal formatting of each value,
5. the clause-count ceiling,
6. mutation.

Rendering
---------
``build()`` emits clauses in a fixed order (SELECT, FROM, WHERE, GROUP BY,
ORDER BY, LIMIT, PARAMETERS) regardless of call order, omits empty
clauses, and can be called any number of times.  Mutation may continue
after a build.

Thread safety
-------------
Separate builders share no state and may be used from separate threads.
A single builder has no internal locking and must not be mutated from
more than one thread at a time.

Example::

    query = (
        QueryBuilder()
        .select(["campaign.id", "campaign.name"])
        .from_("campaign")
        .where("campaign.status", "=", "ENABLED")
        .order_by("campaign.id", "DESC")
        .limit(5)
        .build()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from gaqlbuilder.compile.clause_builders import (
    FromClauseBuilder,
    GroupByClauseBuilder,
    LimitClauseBuilder,
    OrderByClauseBuilder,
    ParametersClauseBuilder,
    SelectClauseBuilder,
    WhereClauseBuilder,
)
from gaqlbuilder.compile.conditions import ConditionBuilder
from gaqlbuilder.compile.formatting import format_literal, format_parameter_value
from gaqlbuilder.compile.state import OrderTerm, QueryState
from gaqlbuilder.errors import (
    EmptyClauseError,
    InvalidDirectionError,
    InvalidResourceNameError,
    QueryBuildError,
    ValidationError,
)
from gaqlbuilder.schema.expressions import (
    SORT_DIRECTIONS,
    ContainsOp,
    MembershipOp,
    NullOp,
    PatternOp,
    SortDirection,
)
from gaqlbuilder.schema.limits import QueryLimits
from gaqlbuilder.schema.values import LiteralValue, ParameterValue
from gaqlbuilder.validate.limits import LimitEnforcer
from gaqlbuilder.validate.names import (
    validate_field_name,
    validate_parameter_name,
    validate_resource_name,
)

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Accumulates GAQL clauses and renders them to a query string.

    Args:
        limits: Ceilings to enforce; defaults to ``QueryLimits()``.
    """

    def __init__(self, limits: QueryLimits | None = None) -> None:
        self._enforcer = LimitEnforcer(limits)
        self._conditions = ConditionBuilder(self._enforcer)
        self._state = QueryState()
        # Render order is fixed here, independent of call order.
        self._clause_builders = (
            SelectClauseBuilder(),
            FromClauseBuilder(),
            WhereClauseBuilder(),
            GroupByClauseBuilder(),
            OrderByClauseBuilder(),
            LimitClauseBuilder(),
            ParametersClauseBuilder(),
        )

    @property
    def limits(self) -> QueryLimits:
        """The ceilings this builder enforces."""
        return self._enforcer.limits

    # ------------------------------------------------------------------
    # SELECT / FROM
    # ------------------------------------------------------------------

    def select(self, fields: Iterable[str]) -> QueryBuilder:
        """Append fields to the SELECT clause.

        Surrounding whitespace is stripped from each field.  Repeated calls
        accumulate; duplicates are kept.

        Raises:
            InvalidFieldNameError: If any field fails the name grammar.
            EmptyClauseError: If ``fields`` is empty.
            QueryLimitError: If the total would exceed ``max_select_fields``.
        """
        names = [_strip(f) for f in _as_name_list("SELECT", fields)]
        for name in names:
            validate_field_name(name)
        if not names:
            raise EmptyClauseError("SELECT", "field")
        self._enforcer.check_select_fields(len(self._state.select_fields) + len(names))
        self._state.select_fields.extend(names)
        return self

    def from_(self, resource: str) -> QueryBuilder:
        """Set the FROM resource (last call wins).

        Raises:
            ValidationError: If ``resource`` is empty.
            InvalidResourceNameError: If it is not a single-segment identifier.
        """
        if not isinstance(resource, str):
            raise InvalidResourceNameError(resource)
        name = resource.strip()
        if not name:
            raise ValidationError(
                "FROM clause requires a resource",
                expected="non-empty string",
                received=f'"{resource}"',
                code="EMPTY_CLAUSE",
                details={"clause": "FROM"},
            )
        validate_resource_name(name)
        self._state.resource = name
        return self

    # ------------------------------------------------------------------
    # WHERE
    # ------------------------------------------------------------------

    def where(self, field: str, operator: str, value: LiteralValue) -> QueryBuilder:
        """Add ``field <operator> value`` for operator in ``= != > >= < <=``."""
        return self._add_condition(self._conditions.comparison(field, operator, value))

    def and_where(self, field: str, operator: str, value: LiteralValue) -> QueryBuilder:
        """Alias of :meth:`where`; every condition is AND-ed."""
        return self.where(field, operator, value)

    def where_in(self, field: str, values: Iterable[LiteralValue]) -> QueryBuilder:
        return self._add_condition(self._conditions.membership(field, MembershipOp.IN, values))

    def where_not_in(self, field: str, values: Iterable[LiteralValue]) -> QueryBuilder:
        return self._add_condition(
            self._conditions.membership(field, MembershipOp.NOT_IN, values)
        )

    def where_like(self, field: str, pattern: str) -> QueryBuilder:
        return self._add_condition(self._conditions.pattern(field, PatternOp.LIKE, pattern))

    def where_not_like(self, field: str, pattern: str) -> QueryBuilder:
        return self._add_condition(self._conditions.pattern(field, PatternOp.NOT_LIKE, pattern))

    def where_regexp_match(self, field: str, pattern: str) -> QueryBuilder:
        """Add ``field REGEXP_MATCH 'pattern'``.

        Raises:
            SecurityError: If the pattern is a ReDoS risk.
        """
        return self._add_condition(
            self._conditions.pattern(field, PatternOp.REGEXP_MATCH, pattern)
        )

    def where_not_regexp_match(self, field: str, pattern: str) -> QueryBuilder:
        return self._add_condition(
            self._conditions.pattern(field, PatternOp.NOT_REGEXP_MATCH, pattern)
        )

    def where_null(self, field: str) -> QueryBuilder:
        return self._add_condition(self._conditions.null_check(field, NullOp.IS_NULL))

    def where_not_null(self, field: str) -> QueryBuilder:
        return self._add_condition(self._conditions.null_check(field, NullOp.IS_NOT_NULL))

    def where_between(self, field: str, low: LiteralValue, high: LiteralValue) -> QueryBuilder:
        return self._add_condition(self._conditions.between(field, low, high))

    def where_contains_all(self, field: str, values: Iterable[LiteralValue]) -> QueryBuilder:
        return self._add_condition(
            self._conditions.containment(field, ContainsOp.CONTAINS_ALL, values)
        )

    def where_contains_any(self, field: str, values: Iterable[LiteralValue]) -> QueryBuilder:
        return self._add_condition(
            self._conditions.containment(field, ContainsOp.CONTAINS_ANY, values)
        )

    def where_contains_none(self, field: str, values: Iterable[LiteralValue]) -> QueryBuilder:
        return self._add_condition(
            self._conditions.containment(field, ContainsOp.CONTAINS_NONE, values)
        )

    def where_during(self, field: str, date_range: str) -> QueryBuilder:
        """Add ``field DURING <range>``.

        Relative ranges (``LAST_30_DAYS``) render bare; absolute
        ``YYYY-MM-DD`` dates render quoted.
        """
        return self._add_condition(self._conditions.during(field, date_range))

    def _add_condition(self, fragment: str) -> QueryBuilder:
        self._enforcer.check_conditions(len(self._state.conditions) + 1)
        self._state.conditions.append(fragment)
        return self

    # ------------------------------------------------------------------
    # GROUP BY / ORDER BY / LIMIT / PARAMETERS
    # ------------------------------------------------------------------

    def group_by(self, fields: Iterable[str]) -> QueryBuilder:
        """Append GROUP BY keys (whitespace stripped); repeated calls accumulate."""
        names = [_strip(f) for f in _as_name_list("GROUP BY", fields)]
        for name in names:
            validate_field_name(name)
        if not names:
            raise EmptyClauseError("GROUP BY", "field")
        self._enforcer.check_group_by_fields(len(self._state.group_by_fields) + len(names))
        self._state.group_by_fields.extend(names)
        return self

    def order_by(
        self, field: str, direction: SortDirection | str = SortDirection.ASC
    ) -> QueryBuilder:
        """Append an ORDER BY key (ascending by default).

        Raises:
            InvalidDirectionError: If ``direction`` is not ``ASC`` or ``DESC``.
        """
        field = _strip(field)
        validate_field_name(field)
        term = OrderTerm(field=field, direction=_parse_direction(direction))
        self._enforcer.check_order_by_fields(len(self._state.order_by) + 1)
        self._state.order_by.append(term)
        return self

    def limit(self, count: int) -> QueryBuilder:
        """Set the row cap (last call wins).

        Raises:
            ValidationError: If ``count`` is not a positive integer.
        """
        if isinstance(count, int) and not isinstance(count, bool):
            # Rejects integers too wide to render.
            format_literal(count)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValidationError(
                "LIMIT must be a positive integer",
                expected="positive integer",
                received=repr(count),
                code="INVALID_LIMIT",
            )
        self._state.limit = count
        return self

    def parameters(self, params: Mapping[str, ParameterValue]) -> QueryBuilder:
        """Replace the PARAMETERS map.

        Raises:
            EmptyClauseError: If ``params`` is empty.
            InvalidParameterNameError: If a name is not a plain identifier.
            SecurityError: If a value is not a boolean or finite number.
            QueryLimitError: If there are more than ``max_parameters`` entries.
        """
        if not isinstance(params, Mapping):
            raise ValidationError(
                "PARAMETERS clause requires a mapping",
                expected="mapping of name to boolean or number",
                received=type(params).__name__,
                code="INVALID_VALUE",
            )
        if not params:
            raise EmptyClauseError(
                "PARAMETERS", "parameter", expected="non-empty mapping", received="empty mapping"
            )
        for name in params:
            validate_parameter_name(name)
        for name, value in params.items():
            format_parameter_value(name, value)
        self._enforcer.check_parameters(len(params))
        self._state.parameters = dict(params)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def build(self) -> str:
        """Render the query.

        Returns:
            The GAQL string with clauses in canonical order.

        Raises:
            QueryBuildError: If SELECT or FROM is missing.
            QueryLimitError: If the result exceeds ``max_query_length``.
        """
        state = self._state
        if not state.select_fields:
            raise QueryBuildError(
                "SELECT", expected="at least one field selected", received="no fields selected"
            )
        if not state.resource:
            raise QueryBuildError("FROM", expected="resource name", received="empty resource")

        clauses = (builder.build(state) for builder in self._clause_builders)
        query = " ".join(clause for clause in clauses if clause)
        self._enforcer.check_query_length(len(query))
        logger.debug(
            "Rendered query on %s: %d fields, %d conditions, %d characters",
            state.resource,
            len(state.select_fields),
            len(state.conditions),
            len(query),
        )
        return query


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _as_name_list(clause: str, fields: Any) -> list[Any]:
    if isinstance(fields, (str, bytes)) or not isinstance(fields, Iterable):
        raise ValidationError(
            f"{clause} clause requires a list of fields",
            expected="list or tuple of field names",
            received=type(fields).__name__,
            code="INVALID_VALUE",
        )
    return list(fields)


def _strip(name: Any) -> Any:
    return name.strip() if isinstance(name, str) else name


def _parse_direction(direction: Any) -> SortDirection:
    if isinstance(direction, SortDirection):
        return direction
    if isinstance(direction, str) and direction in SORT_DIRECTIONS:
        return SortDirection(direction)
    raise InvalidDirectionError(direction)
