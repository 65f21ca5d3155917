"""gaqlbuilder compilation layer: builder state → GAQL text."""
from gaqlbuilder.compile.builder import QueryBuilder
from gaqlbuilder.compile.formatting import (
    format_date_range,
    format_literal,
    format_parameter_value,
    format_pattern,
)
from gaqlbuilder.compile.spec_compiler import SpecCompiler

__all__ = [
    "QueryBuilder",
    "SpecCompiler",
    "format_date_range",
    "format_literal",
    "format_parameter_value",
    "format_pattern",
]
