"""Identifier grammars for fields, resources and parameter names.

Every identifier-accepting builder operation goes through this module, so
there is exactly one definition of each grammar:

* identifier          - ``segment(.segment)*`` with ``segment = [A-Za-z_][A-Za-z0-9_]*``
* aggregate expression - ``FUNC(identifier)`` for ``FUNC`` in
  :data:`~gaqlbuilder.schema.expressions.AGGREGATE_FUNCTIONS`
* resource / parameter - a single segment, no dots

Matching is ASCII-only and whole-string (``re.fullmatch``), so a trailing
newline or a non-ASCII letter never slips through.
"""
from __future__ import annotations

import re
from typing import Any

from gaqlbuilder.errors import (
    InvalidFieldNameError,
    InvalidParameterNameError,
    InvalidResourceNameError,
)
from gaqlbuilder.schema.expressions import AGGREGATE_FUNCTIONS

_SEGMENT = r"[A-Za-z_][A-Za-z0-9_]*"
_IDENTIFIER = rf"{_SEGMENT}(?:\.{_SEGMENT})*"

_IDENTIFIER_RE = re.compile(_IDENTIFIER)
_SEGMENT_RE = re.compile(_SEGMENT)
_AGGREGATE_RE = re.compile(rf"(?:{'|'.join(AGGREGATE_FUNCTIONS)})\({_IDENTIFIER}\)")


def is_valid_identifier(name: Any) -> bool:
    """True when ``name`` is one or more dot-separated identifier segments."""
    return isinstance(name, str) and _IDENTIFIER_RE.fullmatch(name) is not None


def is_valid_aggregate_expression(name: Any) -> bool:
    """True when ``name`` is a known aggregate applied to one identifier.

    Example: ``SUM(metrics.clicks)``.
    """
    return isinstance(name, str) and _AGGREGATE_RE.fullmatch(name) is not None


def is_valid_field_name(name: Any) -> bool:
    """True for an identifier or an aggregate expression."""
    return is_valid_identifier(name) or is_valid_aggregate_expression(name)


def is_valid_resource_name(name: Any) -> bool:
    """True for a single-segment identifier (``ad_group``, not ``a.b``)."""
    return isinstance(name, str) and _SEGMENT_RE.fullmatch(name) is not None


def is_valid_parameter_name(name: Any) -> bool:
    """True for a single-segment identifier."""
    return isinstance(name, str) and _SEGMENT_RE.fullmatch(name) is not None


def validate_field_name(name: Any) -> str:
    """Return ``name`` unchanged or raise :class:`InvalidFieldNameError`."""
    if not is_valid_field_name(name):
        raise InvalidFieldNameError(name)
    return name


def validate_resource_name(name: Any) -> str:
    """Return ``name`` unchanged or raise :class:`InvalidResourceNameError`."""
    if not is_valid_resource_name(name):
        raise InvalidResourceNameError(name)
    return name


def validate_parameter_name(name: Any) -> str:
    """Return ``name`` unchanged or raise :class:`InvalidParameterNameError`."""
    if not is_valid_parameter_name(name):
        raise InvalidParameterNameError(name)
    return name
