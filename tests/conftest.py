"""Shared pytest fixtures for gaqlbuilder tests."""
from __future__ import annotations

import pytest

from gaqlbuilder.compile.builder import QueryBuilder
from gaqlbuilder.schema.limits import QueryLimits


@pytest.fixture
def builder() -> QueryBuilder:
    """Fresh builder with default limits."""
    return QueryBuilder()


@pytest.fixture
def campaign_builder() -> QueryBuilder:
    """Builder with ``SELECT campaign.id FROM campaign`` already set."""
    return QueryBuilder().select(["campaign.id"]).from_("campaign")


@pytest.fixture(scope="session")
def tight_limits() -> QueryLimits:
    """Small ceilings so limit tests stay fast and readable."""
    return QueryLimits(
        max_select_fields=3,
        max_where_conditions=2,
        max_array_values=3,
        max_group_by_fields=2,
        max_order_by_fields=2,
        max_parameters=2,
        max_query_length=80,
        max_pattern_length=10,
        max_pattern_depth=2,
    )
