"""Response objects handed back by the mock provider."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# Column key of the single row produced by a scalar mock
SCALAR_VALUE_KEY = "value"


class ItemsResponse(BaseModel):
    """Result of a select query."""

    success: bool = True
    error_message: str = ""
    rows: list[dict[str, Any]] = []

    @property
    def scalar(self) -> Any:
        """First value of the first row, or None if there are no rows."""
        if not self.rows:
            return None
        return next(iter(self.rows[0].values()), None)


class DefaultValuesResponse(BaseModel):
    """Default column values of a schema."""

    success: bool = True
    error_message: str = ""
    values: dict[str, Any] = {}


class ExecuteResponse(BaseModel):
    """Result of a batch execution."""

    success: bool = True
    error_message: str = ""
    query_results: list[Any] = []
