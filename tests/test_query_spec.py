"""Tests for the declarative QuerySpec models and build_query()."""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

import gaqlbuilder
from gaqlbuilder import QueryLimits, SpecCompiler
from gaqlbuilder.errors import (
    InvalidFieldNameError,
    InvalidValueError,
    ParseError,
    QueryLimitError,
    SecurityError,
    ValidationError,
)
from gaqlbuilder.schema.query_spec import ConditionSpec, OrderSpec, QuerySpec
from tests.fixtures import load_query_spec, load_query_spec_text


class TestModels:
    def test_from_alias(self):
        spec = QuerySpec.model_validate({"select": ["id"], "from": "campaign"})
        assert spec.from_ == "campaign"

    def test_populate_by_name(self):
        spec = QuerySpec(select=["id"], from_="campaign")
        assert spec.from_ == "campaign"
        assert spec.where == []
        assert spec.limit is None

    def test_unknown_key_rejected(self):
        with pytest.raises(PydanticValidationError):
            QuerySpec.model_validate({"select": ["id"], "from": "campaign", "join": "x"})

    def test_missing_from_rejected(self):
        with pytest.raises(PydanticValidationError):
            QuerySpec.model_validate({"select": ["id"]})

    def test_unknown_operator_rejected(self):
        with pytest.raises(PydanticValidationError):
            ConditionSpec(field="a", op="OR", value=1)

    @pytest.mark.parametrize(
        "data",
        [
            {"field": "a", "op": "="},
            {"field": "a", "op": "IN"},
            {"field": "a", "op": "LIKE"},
            {"field": "a", "op": "BETWEEN", "low": 1},
            {"field": "a", "op": "DURING"},
        ],
    )
    def test_missing_operand_rejected(self, data):
        with pytest.raises(PydanticValidationError, match="requires"):
            ConditionSpec.model_validate(data)

    def test_explicit_null_value_accepted(self):
        cond = ConditionSpec.model_validate({"field": "a", "op": "=", "value": None})
        assert cond.value is None

    def test_null_check_needs_no_operand(self):
        assert ConditionSpec(field="a", op="IS_NULL").op == "IS_NULL"

    def test_order_default_direction(self):
        assert OrderSpec(field="a").direction == "ASC"


class TestSpecCompiler:
    def test_every_operator(self):
        spec = QuerySpec.model_validate(
            {
                "select": ["id"],
                "from": "campaign",
                "where": [
                    {"field": "a", "op": "=", "value": "x"},
                    {"field": "b", "op": "!=", "value": None},
                    {"field": "c", "op": ">", "value": 1},
                    {"field": "d", "op": ">=", "value": 2},
                    {"field": "e", "op": "<", "value": 3},
                    {"field": "f", "op": "<=", "value": 4.5},
                    {"field": "g", "op": "IN", "values": [1, 2]},
                    {"field": "h", "op": "NOT_IN", "values": ["x"]},
                    {"field": "i", "op": "LIKE", "pattern": "%x%"},
                    {"field": "j", "op": "NOT_LIKE", "pattern": "y%"},
                    {"field": "k", "op": "REGEXP_MATCH", "pattern": "^z"},
                    {"field": "l", "op": "NOT_REGEXP_MATCH", "pattern": "w$"},
                    {"field": "m", "op": "IS_NULL"},
                    {"field": "n", "op": "IS_NOT_NULL"},
                    {"field": "o", "op": "BETWEEN", "low": 1, "high": 9},
                    {"field": "p", "op": "CONTAINS_ALL", "values": ["a"]},
                    {"field": "q", "op": "CONTAINS_ANY", "values": ["b"]},
                    {"field": "r", "op": "CONTAINS_NONE", "values": ["c"]},
                    {"field": "s", "op": "DURING", "date_range": "YESTERDAY"},
                ],
            }
        )
        query = SpecCompiler().compile(spec)
        assert query == (
            "SELECT id FROM campaign WHERE a = 'x' AND b != NULL AND c > 1 AND d >= 2 "
            "AND e < 3 AND f <= 4.5 AND g IN (1, 2) AND h NOT IN ('x') "
            "AND i LIKE '%x%' AND j NOT LIKE 'y%' AND k REGEXP_MATCH '^z' "
            "AND l NOT REGEXP_MATCH 'w$' AND m IS NULL AND n IS NOT NULL "
            "AND o BETWEEN 1 AND 9 AND p CONTAINS ALL ('a') AND q CONTAINS ANY ('b') "
            "AND r CONTAINS NONE ('c') AND s DURING YESTERDAY"
        )

    def test_limits_applied(self):
        spec = QuerySpec(select=["a", "b"], from_="campaign")
        with pytest.raises(QueryLimitError):
            SpecCompiler(QueryLimits(max_select_fields=1)).compile(spec)


class TestBuildQuery:
    def test_campaign_performance_fixture(self):
        query = gaqlbuilder.build_query(load_query_spec_text("campaign_performance"))
        assert query == (
            "SELECT campaign.id, campaign.name, metrics.clicks, metrics.impressions "
            "FROM campaign "
            "WHERE campaign.status IN ('ENABLED', 'PAUSED') "
            "AND segments.date DURING LAST_30_DAYS AND metrics.clicks > 100 "
            "ORDER BY metrics.clicks DESC LIMIT 50"
        )

    def test_keyword_report_fixture_as_dict(self):
        query = gaqlbuilder.build_query(load_query_spec("keyword_report"))
        assert query == (
            "SELECT ad_group_criterion.keyword.text, SUM(metrics.cost_micros) "
            "FROM keyword_view "
            "WHERE ad_group_criterion.keyword.text LIKE '%shoe%' "
            "AND segments.date BETWEEN '2024-01-01' AND '2024-01-31' "
            "AND campaign.labels CONTAINS NONE ('customers/1/labels/2') "
            "AND ad_group.end_date IS NULL "
            "GROUP BY ad_group_criterion.keyword.text "
            "ORDER BY ad_group_criterion.keyword.text ASC LIMIT 10 "
            "PARAMETERS include_drafts = true"
        )

    def test_unsafe_pattern_fixture(self):
        with pytest.raises(SecurityError):
            gaqlbuilder.build_query(load_query_spec_text("unsafe_pattern"))

    def test_invalid_json(self):
        with pytest.raises(ParseError, match="Invalid JSON") as exc_info:
            gaqlbuilder.build_query("{not json")
        assert exc_info.value.raw == "{not json"
        assert exc_info.value.code == "PARSE_ERROR"

    def test_oversized_json_integer(self):
        text = '{"select": ["id"], "from": "campaign", "limit": ' + "9" * 5000 + "}"
        with pytest.raises(ParseError, match="^Invalid JSON"):
            gaqlbuilder.build_query(text)

    def test_invalid_structure(self):
        with pytest.raises(ParseError, match="QuerySpec structure is invalid"):
            gaqlbuilder.build_query(json.dumps({"select": "id", "from": "campaign"}))

    def test_builder_validation_still_applies(self):
        with pytest.raises(InvalidFieldNameError):
            gaqlbuilder.build_query({"select": ["id; DROP"], "from": "campaign"})

    @pytest.mark.parametrize("limit", [True, "5", 5.0, 0])
    def test_limit_not_coerced(self, limit):
        with pytest.raises(ValidationError, match="^LIMIT must be a positive integer"):
            gaqlbuilder.build_query({"select": ["id"], "from": "campaign", "limit": limit})

    def test_limit_kept_as_given(self):
        spec = QuerySpec.model_validate({"select": ["id"], "from": "campaign", "limit": "5"})
        assert spec.limit == "5"

    def test_oversized_integer_value(self):
        spec = {
            "select": ["id"],
            "from": "campaign",
            "where": [{"field": "a", "op": "=", "value": 10**5000}],
        }
        with pytest.raises(InvalidValueError, match="integer too large"):
            gaqlbuilder.build_query(spec)

    def test_string_parameter_not_coerced(self):
        with pytest.raises(SecurityError):
            gaqlbuilder.build_query(
                {"select": ["id"], "from": "campaign", "parameters": {"p": "true"}}
            )

    def test_custom_limits(self):
        with pytest.raises(QueryLimitError):
            gaqlbuilder.build_query(
                {"select": ["id"], "from": "campaign", "limit": 1},
                limits=QueryLimits(max_query_length=10),
            )
