"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from query_mock.core.enums import AggregationType
from query_mock.core.query import Column, Filter, SelectQuery, where
from query_mock.provider import DataProviderMock


@pytest.fixture
def provider() -> DataProviderMock:
    """Fresh non-strict provider."""
    return DataProviderMock()


@pytest.fixture
def select_query():
    """Helper to build select queries from keyword filters.

    Usage:
        select_query("Contact", Name="Alice")
        select_query("Contact", aggregation=AggregationType.COUNT)
    """

    def _build(
        schema_name: str,
        *,
        aggregation: AggregationType = AggregationType.NONE,
        columns: tuple[Column, ...] | None = None,
        **filters: Any,
    ) -> SelectQuery:
        if columns is None:
            if aggregation is AggregationType.NONE:
                columns = (Column("Id"), Column("Name"))
            else:
                columns = (Column("Id", aggregation=aggregation),)
        group = where(*(Filter(path, value) for path, value in filters.items())) if filters else None
        return SelectQuery(schema_name, columns=columns, filters=group)

    return _build
