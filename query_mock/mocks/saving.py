"""Saving-item mock for batch insert / update / delete expectations.

Saving mocks never produce a payload. A batch only marks them received,
which is what tests assert on.
"""

from __future__ import annotations

from typing import Any

from query_mock.core.enums import SavingOperation
from query_mock.core.exceptions import MockConfigurationError, ParameterExtractionError
from query_mock.core.params import ColumnValues, contains_column_values, normalize_value
from query_mock.mocks.base import BaseMock


class SavingItemMock(BaseMock):
    """Expectation for one mutation query in a batch.

    Args:
        schema_name: Name of the schema the mutation targets.
        operation: Insert, update or delete.
    """

    def __init__(self, schema_name: str, operation: SavingOperation) -> None:
        super().__init__(schema_name)
        if not isinstance(operation, SavingOperation):
            raise MockConfigurationError(f"Unsupported saving operation {operation!r}")
        self._operation = operation
        self._column_values: ColumnValues = {}

    @property
    def operation(self) -> SavingOperation:
        return self._operation

    @property
    def column_values(self) -> ColumnValues:
        return dict(self._column_values)

    def changed_value_has(self, column: str, value: Any) -> SavingItemMock:
        """Require the query to assign *value* to *column*."""
        if not isinstance(column, str) or not column:
            raise MockConfigurationError("Column name must be a non-empty string")
        try:
            self._column_values[column] = normalize_value(value, allow_sequence=False)
        except ParameterExtractionError as e:
            raise MockConfigurationError(f"Invalid value for column '{column}': {e.detail}") from e
        return self

    def check_by_column_values(self, column_values: ColumnValues) -> bool:
        """Return True if every expected column assignment is present in *column_values*."""
        return contains_column_values(self._column_values, column_values)

    def describe(self) -> str:
        description = f"{super().describe()} operation={self._operation.value}"
        if self._column_values:
            description += f" column_values={self._column_values}"
        return description
