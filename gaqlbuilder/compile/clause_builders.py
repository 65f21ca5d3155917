"""Clause-level renderers.

Each class renders exactly one clause from a :class:`QueryState` and
returns ``None`` when the clause has nothing to emit, so the assembler can
skip it.  Values reaching these renderers have already been validated by
the builder; the only formatting left is parameter values, which are
checked again here because the PARAMETERS clause is an injection vector.

Classes
-------
SelectClauseBuilder      - ``SELECT f1, f2``
FromClauseBuilder        - ``FROM resource``
WhereClauseBuilder       - ``WHERE c1 AND c2``
GroupByClauseBuilder     - ``GROUP BY f1, f2``
OrderByClauseBuilder     - ``ORDER BY f1 DESC, f2 ASC``
LimitClauseBuilder       - ``LIMIT n``
ParametersClauseBuilder  - ``PARAMETERS p1 = true, p2 = 10``
"""
from __future__ import annotations

from gaqlbuilder.compile.formatting import format_parameter_value
from gaqlbuilder.compile.state import QueryState
from gaqlbuilder.schema.expressions import CONDITION_CONJUNCTION


class SelectClauseBuilder:
    """Builds the ``SELECT`` clause."""

    def build(self, state: QueryState) -> str | None:
        if not state.select_fields:
            return None
        return f"SELECT {', '.join(state.select_fields)}"


class FromClauseBuilder:
    """Builds the ``FROM`` clause."""

    def build(self, state: QueryState) -> str | None:
        if not state.resource:
            return None
        return f"FROM {state.resource}"


class WhereClauseBuilder:
    """Builds the ``WHERE`` clause from pre-rendered fragments."""

    def build(self, state: QueryState) -> str | None:
        if not state.conditions:
            return None
        return f"WHERE {CONDITION_CONJUNCTION.join(state.conditions)}"


class GroupByClauseBuilder:
    """Builds the ``GROUP BY`` clause."""

    def build(self, state: QueryState) -> str | None:
        if not state.group_by_fields:
            return None
        return f"GROUP BY {', '.join(state.group_by_fields)}"


class OrderByClauseBuilder:
    """Builds the ``ORDER BY`` clause."""

    def build(self, state: QueryState) -> str | None:
        if not state.order_by:
            return None
        terms = [f"{term.field} {term.direction.value}" for term in state.order_by]
        return f"ORDER BY {', '.join(terms)}"


class LimitClauseBuilder:
    """Builds the ``LIMIT`` clause."""

    def build(self, state: QueryState) -> str | None:
        if state.limit is None:
            return None
        return f"LIMIT {state.limit}"


class ParametersClauseBuilder:
    """Builds the ``PARAMETERS`` clause in insertion order."""

    def build(self, state: QueryState) -> str | None:
        if not state.parameters:
            return None
        entries = [
            f"{name} = {format_parameter_value(name, value)}"
            for name, value in state.parameters.items()
        ]
        return f"PARAMETERS {', '.join(entries)}"
