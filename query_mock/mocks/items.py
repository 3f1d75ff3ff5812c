"""Mocks answering select queries: row collections and scalar aggregates."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from query_mock.core.enums import AggregationType
from query_mock.core.exceptions import MockConfigurationError
from query_mock.core.responses import SCALAR_VALUE_KEY, ItemsResponse
from query_mock.mocks.base import ResponseMock


class ItemsMock(ResponseMock):
    """Answers collection queries with a list of row dicts.

    Example:
        >>> provider.mock_items("Contact").filter_has("Name", "Alice").returns(
        ...     [{"Id": 1, "Name": "Alice"}]
        ... )
    """

    def get_result(self, *, copy_results: bool = True) -> ItemsResponse:
        if self._error_message is not None:
            return ItemsResponse(success=False, error_message=self._error_message)

        rows = self._payload(copy_results)
        try:
            return ItemsResponse(rows=rows if rows is not None else [])
        except ValidationError as e:
            raise MockConfigurationError(
                f"{self.describe()} must return a list of row dicts: {e}"
            ) from e


class ScalarMock(ResponseMock):
    """Answers single-column aggregate queries (count, sum, ...) with one value.

    Args:
        schema_name: Name of the schema the mock applies to.
        aggregation_type: Aggregate function the query must project.
    """

    def __init__(self, schema_name: str, aggregation_type: AggregationType) -> None:
        super().__init__(schema_name)
        if not isinstance(aggregation_type, AggregationType):
            raise MockConfigurationError(f"Unsupported aggregation type {aggregation_type!r}")
        if aggregation_type is AggregationType.NONE:
            raise MockConfigurationError("Scalar mocks require an aggregation type other than NONE")
        self._aggregation_type = aggregation_type

    @property
    def aggregation_type(self) -> AggregationType:
        return self._aggregation_type

    def get_result(self, *, copy_results: bool = True) -> ItemsResponse:
        if self._error_message is not None:
            return ItemsResponse(success=False, error_message=self._error_message)

        value: Any = self._payload(copy_results)
        return ItemsResponse(rows=[{SCALAR_VALUE_KEY: value}])

    def describe(self) -> str:
        return f"{super().describe()} aggregation={self._aggregation_type.value}"
