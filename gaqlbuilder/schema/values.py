"""Closed value types accepted at the builder boundary.

Condition values and engine parameter values are deliberately narrow unions;
anything outside them is rejected by the formatters rather than coerced.
"""
from __future__ import annotations

from typing import Union

#: A scalar that can be rendered as a GAQL literal inside a condition.
LiteralValue = Union[str, int, float, bool, None]

#: A value allowed in the PARAMETERS clause.  Strings are excluded on purpose.
ParameterValue = Union[bool, int, float]
