"""gaqlbuilder validation layer: names, dates, pattern safety, ceilings."""
from gaqlbuilder.validate.dates import (
    is_relative_date_range,
    is_valid_absolute_date,
    is_valid_date_or_range,
    validate_date_range,
)
from gaqlbuilder.validate.limits import LimitEnforcer
from gaqlbuilder.validate.names import (
    is_valid_field_name,
    is_valid_parameter_name,
    is_valid_resource_name,
    validate_field_name,
    validate_parameter_name,
    validate_resource_name,
)
from gaqlbuilder.validate.patterns import find_pattern_violation, is_pattern_safe, validate_pattern

__all__ = [
    "is_relative_date_range",
    "is_valid_absolute_date",
    "is_valid_date_or_range",
    "validate_date_range",
    "LimitEnforcer",
    "is_valid_field_name",
    "is_valid_parameter_name",
    "is_valid_resource_name",
    "validate_field_name",
    "validate_parameter_name",
    "validate_resource_name",
    "find_pattern_violation",
    "is_pattern_safe",
    "validate_pattern",
]
