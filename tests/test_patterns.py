"""Unit tests for the ReDoS pattern guard."""
from __future__ import annotations

import pytest

from gaqlbuilder.errors import SecurityError
from gaqlbuilder.schema.limits import QueryLimits
from gaqlbuilder.validate.patterns import (
    find_pattern_violation,
    is_pattern_safe,
    validate_pattern,
)


def _nested(depth: int) -> str:
    pattern = "a"
    for _ in range(depth):
        pattern = f"({pattern})"
    return pattern


@pytest.mark.parametrize(
    "pattern",
    [
        "test",
        "%brand%",
        "^campaign_\\d+$",
        "(?i)brand",
        "(?i).*brand.*",
        "[a-zA-Z0-9]+",
        "[a-zA-Z0-9_-]+",
        "sale|discount|offer",
        "(([a-z]+)_([0-9]+))",
        "((test|prod)_(v1|v2))",
        "test\\.\\*campaign",
        "(ab){99}",
        "(ab){2,5}",
        "\\w+\\w+",
        "",
    ],
)
def test_safe_patterns_accepted(pattern):
    assert is_pattern_safe(pattern)
    assert validate_pattern(pattern) == pattern


@pytest.mark.parametrize(
    "pattern",
    [
        ".*.*",
        ".*.*.*",
        ".+.+",
        ".*.+",
        ".+.*",
        ".*.+.*.+",
        "\\w*\\w*\\w*",
        "\\w+\\w+\\w+",
        "[\\w]*[\\w]*[\\w]*",
        "(.*){1000}",
        "(a+){100,}",
        "(a+){1000,}",
        "(a){100}",
        "(a){1,100}",
        "(.*|.*)",
        "(.+|.+)",
        "(\\w+|\\w+)",
    ],
)
def test_dangerous_patterns_rejected(pattern):
    assert not is_pattern_safe(pattern)
    assert find_pattern_violation(pattern) is not None


class TestLength:
    def test_at_limit_accepted(self):
        assert is_pattern_safe("a" * 1000)

    def test_over_limit_rejected(self):
        violation = find_pattern_violation("a" * 1001)
        assert violation == "1001 characters (maximum 1000)"

    def test_custom_limit(self):
        limits = QueryLimits(max_pattern_length=5)
        assert is_pattern_safe("abcde", limits)
        assert not is_pattern_safe("abcdef", limits)


class TestNesting:
    def test_reasonable_nesting_accepted(self):
        assert is_pattern_safe(_nested(50))

    def test_excessive_nesting_rejected(self):
        assert find_pattern_violation(_nested(60)) == "nesting depth 60 (maximum 50)"

    def test_escaped_parentheses_not_counted(self):
        limits = QueryLimits(max_pattern_depth=1)
        assert is_pattern_safe("\\(\\(\\(a\\)\\)\\)", limits)

    def test_parentheses_in_character_class_not_counted(self):
        limits = QueryLimits(max_pattern_depth=1)
        assert is_pattern_safe("(a[((]b)", limits)

    def test_unbalanced_close_does_not_go_negative(self):
        limits = QueryLimits(max_pattern_depth=1)
        assert is_pattern_safe("))(a)", limits)


def test_non_string_pattern_rejected():
    assert not is_pattern_safe(None)
    assert not is_pattern_safe(123)


def test_validate_pattern_raises_security_error():
    with pytest.raises(SecurityError) as exc_info:
        validate_pattern(".*.*")
    message = str(exc_info.value)
    assert message.startswith("Regex pattern is potentially dangerous (ReDoS risk).")
    assert message.endswith("Received: '.*.*'")
    assert exc_info.value.code == "UNSAFE_PATTERN"
    assert exc_info.value.details == {"reason": "repeated unbounded '.' quantifier sequence"}


def test_mixed_dot_quantifiers_report_reason():
    assert find_pattern_violation("a.*.+b") == "repeated unbounded '.' quantifier sequence"


def test_long_pattern_is_truncated_in_error():
    pattern = "x" * 60 + ".*.*"
    with pytest.raises(SecurityError) as exc_info:
        validate_pattern(pattern)
    assert exc_info.value.received == repr("x" * 50) + "..."
