"""QueryMock - in-memory data provider double for structured queries."""

from __future__ import annotations

from query_mock.core.config import ProviderConfig
from query_mock.core.engine import MatchingEngine, is_scalar_query
from query_mock.core.enums import (
    AggregationType,
    ComparisonType,
    LogicalOperation,
    SavingOperation,
)
from query_mock.core.exceptions import (
    MockConfigurationError,
    MockNotReceivedError,
    ParameterExtractionError,
    QueryMockError,
    UnmatchedQueryError,
    UnsupportedQueryError,
)
from query_mock.core.params import (
    FilterCondition,
    extract_column_values,
    extract_parameters,
)
from query_mock.core.query import (
    BatchQuery,
    Column,
    DeleteQuery,
    Filter,
    FilterGroup,
    InsertQuery,
    Parameter,
    SelectQuery,
    UpdateQuery,
    where,
)
from query_mock.core.registry import DefaultValuesRegistry, MockRegistry
from query_mock.core.responses import DefaultValuesResponse, ExecuteResponse, ItemsResponse
from query_mock.mocks import (
    DefaultValuesMock,
    ItemsMock,
    SavingItemMock,
    ScalarMock,
)
from query_mock.protocol import DataProvider
from query_mock.provider import DataProviderMock

__all__ = [
    # Provider
    "DataProvider",
    "DataProviderMock",
    "ProviderConfig",
    # Mocks
    "DefaultValuesMock",
    "ItemsMock",
    "ScalarMock",
    "SavingItemMock",
    # Registries and matching
    "MockRegistry",
    "DefaultValuesRegistry",
    "MatchingEngine",
    "is_scalar_query",
    # Query model
    "Parameter",
    "Column",
    "Filter",
    "FilterGroup",
    "where",
    "SelectQuery",
    "InsertQuery",
    "UpdateQuery",
    "DeleteQuery",
    "BatchQuery",
    # Parameters
    "FilterCondition",
    "extract_parameters",
    "extract_column_values",
    # Responses
    "ItemsResponse",
    "DefaultValuesResponse",
    "ExecuteResponse",
    # Enums
    "AggregationType",
    "ComparisonType",
    "LogicalOperation",
    "SavingOperation",
    # Exceptions
    "QueryMockError",
    "ParameterExtractionError",
    "UnsupportedQueryError",
    "UnmatchedQueryError",
    "MockConfigurationError",
    "MockNotReceivedError",
]
