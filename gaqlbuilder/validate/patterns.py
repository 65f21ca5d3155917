"""Static ReDoS guard for LIKE / REGEXP_MATCH patterns.

Patterns are evaluated downstream by a backtracking engine, so shapes that
blow up multiplicatively or exponentially are rejected before they reach a
condition fragment.  The check is a best-effort heuristic: it rejects the
well-known catastrophic shapes, it does not prove linear-time evaluation.

Checks (all must pass)
----------------------
1. Length within ``max_pattern_length``.
2. No run of two or more ``.*``/``.+`` in any mix, and no run of three or
   more ``\\w*``/``\\w+``/``[\\w]*``.
3. No group quantifier with a bound of 100 or more, and no open-ended
   ``{n,}`` group quantifier.
4. No alternation between two identical unbounded branches, e.g. ``(.*|.*)``.
5. Unescaped parenthesis nesting within ``max_pattern_depth``.
"""
from __future__ import annotations

import logging
import re
from typing import Any

from gaqlbuilder.errors import SecurityError
from gaqlbuilder.schema.limits import DEFAULT_LIMITS, QueryLimits

logger = logging.getLogger(__name__)

#: Smallest group repetition bound treated as dangerous.
MAX_GROUP_REPETITION = 100

_PREVIEW_CHARS = 50

_DANGEROUS_SHAPES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("repeated unbounded '.' quantifier sequence", re.compile(r"(?:\.[*+]){2,}")),
    ("repeated '\\w' quantifier sequence", re.compile(r"(?:\\w[*+]){3,}")),
    ("repeated '[\\w]' quantifier sequence", re.compile(r"(?:\[\\w\][*+]){3,}")),
    (
        "alternation of identical unbounded branches",
        re.compile(r"\(((?:\.|\\[wdsWDS])[*+])\|\1\)"),
    ),
)

_GROUP_QUANTIFIER_RE = re.compile(r"\)\{([0-9]+)(?:(,)([0-9]*))?\}")


def _nesting_depth(pattern: str) -> int:
    """Maximum depth of unescaped ``(`` outside character classes."""
    depth = 0
    max_depth = 0
    escaped = False
    in_class = False
    for char in pattern:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "(":
            depth += 1
            max_depth = max(max_depth, depth)
        elif char == ")":
            depth = max(0, depth - 1)
    return max_depth


def _group_quantifier_violation(pattern: str) -> str | None:
    for match in _GROUP_QUANTIFIER_RE.finditer(pattern):
        low, comma, high = match.groups()
        if comma and not high:
            return f"open-ended group repetition {match.group(0)[1:]}"
        bounds = [int(low)] + ([int(high)] if high else [])
        if max(bounds) >= MAX_GROUP_REPETITION:
            return f"large group repetition {match.group(0)[1:]}"
    return None


def find_pattern_violation(pattern: Any, limits: QueryLimits | None = None) -> str | None:
    """Return a description of the first failed check, or ``None`` if safe.

    Args:
        pattern: The raw LIKE / REGEXP_MATCH pattern text.
        limits: Ceilings for length and nesting; defaults to :class:`QueryLimits`.
    """
    limits = limits or DEFAULT_LIMITS
    if not isinstance(pattern, str):
        return f"non-string pattern of type {type(pattern).__name__}"

    if len(pattern) > limits.max_pattern_length:
        return f"{len(pattern)} characters (maximum {limits.max_pattern_length})"

    for description, shape in _DANGEROUS_SHAPES:
        if shape.search(pattern):
            return description

    violation = _group_quantifier_violation(pattern)
    if violation:
        return violation

    depth = _nesting_depth(pattern)
    if depth > limits.max_pattern_depth:
        return f"nesting depth {depth} (maximum {limits.max_pattern_depth})"

    return None


def _preview(pattern: Any) -> str:
    """``repr`` of the pattern, cut to ``_PREVIEW_CHARS`` characters."""
    if not isinstance(pattern, str):
        return type(pattern).__name__
    if len(pattern) > _PREVIEW_CHARS:
        return f"{pattern[:_PREVIEW_CHARS]!r}..."
    return repr(pattern)


def is_pattern_safe(pattern: Any, limits: QueryLimits | None = None) -> bool:
    """True when ``pattern`` passes every check in this module."""
    return find_pattern_violation(pattern, limits) is None


def validate_pattern(pattern: Any, limits: QueryLimits | None = None) -> str:
    """Return ``pattern`` unchanged or raise :class:`SecurityError`.

    Raises:
        SecurityError: If any check fails.
    """
    violation = find_pattern_violation(pattern, limits)
    if violation is not None:
        logger.debug("Rejected pattern: %s", violation)
        raise SecurityError(
            "Regex pattern is potentially dangerous (ReDoS risk). Pattern exceeds "
            "complexity limits or contains dangerous constructs",
            expected="pattern without catastrophic-backtracking constructs",
            received=_preview(pattern),
            code="UNSAFE_PATTERN",
            details={"reason": violation},
        )
    return pattern
