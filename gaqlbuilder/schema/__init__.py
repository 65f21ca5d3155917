"""gaqlbuilder schema: vocabulary enums, value types, limits, QuerySpec."""
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
from gaqlbuilder.schema.values import LiteralValue, ParameterValue

__all__ = [
    "ComparisonOp",
    "ContainsOp",
    "DateRange",
    "MembershipOp",
    "NullOp",
    "PatternOp",
    "SortDirection",
    "DEFAULT_LIMITS",
    "QueryLimits",
    "ConditionSpec",
    "OrderSpec",
    "QuerySpec",
    "LiteralValue",
    "ParameterValue",
]
