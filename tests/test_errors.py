"""Tests for the error hierarchy and structured error responses."""
from __future__ import annotations

import pytest

from gaqlbuilder import QueryBuilder
from gaqlbuilder.errors import (
    EmptyClauseError,
    GaqlError,
    InvalidDateRangeError,
    InvalidDirectionError,
    InvalidFieldNameError,
    InvalidOperatorError,
    InvalidParameterNameError,
    InvalidResourceNameError,
    InvalidValueError,
    ParseError,
    QueryBuildError,
    QueryLimitError,
    SecurityError,
    ValidationError,
    describe,
)


def test_describe_format():
    assert describe("Bad thing", "good thing", '"x"') == 'Bad thing. Expected: good thing, Received: "x"'


@pytest.mark.parametrize(
    "cls",
    [
        InvalidFieldNameError,
        InvalidResourceNameError,
        InvalidParameterNameError,
        InvalidOperatorError,
        InvalidDateRangeError,
        InvalidDirectionError,
        InvalidValueError,
        EmptyClauseError,
        QueryBuildError,
    ],
)
def test_validation_subclasses(cls):
    assert issubclass(cls, ValidationError)
    assert issubclass(cls, GaqlError)


def test_categories_are_distinct():
    assert not issubclass(SecurityError, ValidationError)
    assert not issubclass(QueryLimitError, ValidationError)
    assert not issubclass(QueryLimitError, SecurityError)
    assert issubclass(ParseError, GaqlError)


class TestCategoryPerFailure:
    def test_bad_identifier_is_validation(self):
        with pytest.raises(ValidationError):
            QueryBuilder().select(["a b"])

    def test_unsafe_pattern_is_security(self):
        with pytest.raises(SecurityError):
            QueryBuilder().where_regexp_match("a", ".*.*")

    def test_ceiling_is_limit(self):
        with pytest.raises(QueryLimitError):
            QueryBuilder().where_in("a", list(range(1001)))

    def test_missing_clause_is_validation(self):
        with pytest.raises(ValidationError):
            QueryBuilder().build()


class TestErrorResponse:
    def test_validation_error_response(self):
        err = InvalidFieldNameError("bad field")
        response = err.to_error_response()
        assert response["error"] == "INVALID_FIELD_NAME"
        assert response["message"] == str(err)
        assert response["expected"] == "alphanumeric with dots/underscores or aggregate function"
        assert response["received"] == '"bad field"'
        assert response["details"] == {"field": "bad field"}

    def test_limit_error_response(self):
        err = QueryLimitError("ORDER BY", "field", 10, 11)
        response = err.to_error_response()
        assert response["error"] == "QUERY_LIMIT_EXCEEDED"
        assert response["expected"] == "<= 10 fields"
        assert response["received"] == "11 fields"
        assert response["details"] == {"clause": "ORDER BY", "limit": 10, "count": 11}

    def test_parse_error_has_no_expected(self):
        response = ParseError("Invalid JSON", raw="{").to_error_response()
        assert response["error"] == "PARSE_ERROR"
        assert response["expected"] is None

    def test_non_string_received_uses_repr(self):
        assert str(InvalidFieldNameError(42)).endswith("Received: 42")
