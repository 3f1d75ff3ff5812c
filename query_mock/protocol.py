"""Data provider protocol.

The data-access layer talks to its provider through this interface only.
DataProviderMock implements it, so application code typed against
DataProvider accepts the mock in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from query_mock.core.query import BatchQuery, SelectQuery
from query_mock.core.responses import DefaultValuesResponse, ExecuteResponse, ItemsResponse


@runtime_checkable
class DataProvider(Protocol):
    """Synchronous data provider protocol."""

    def get_default_values(self, schema_name: str) -> DefaultValuesResponse | None:
        """Return default column values for a schema."""
        ...

    def get_items(self, query: SelectQuery) -> ItemsResponse | None:
        """Execute a select query."""
        ...

    def batch_execute(self, queries: Sequence[BatchQuery]) -> ExecuteResponse:
        """Execute insert / update / delete queries in order."""
        ...
