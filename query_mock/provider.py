"""Mock data provider.

DataProviderMock stands in for the real data provider in tests. Expectations
are registered with the ``mock_*`` methods; queries arrive through
``get_default_values``, ``get_items`` and ``batch_execute`` and are answered
from the first matching registration.

    provider = DataProviderMock()
    contacts = provider.mock_items("Contact").filter_has("Name", "Alice")
    contacts.returns([{"Id": 1, "Name": "Alice"}])

    response = provider.get_items(query)
    assert contacts.received_count == 1

Not thread-safe: build one provider per test.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from query_mock.core.config import ProviderConfig
from query_mock.core.engine import MatchingEngine
from query_mock.core.enums import AggregationType, SavingOperation
from query_mock.core.exceptions import MockNotReceivedError, UnmatchedQueryError
from query_mock.core.query import BatchQuery, SelectQuery
from query_mock.core.registry import DefaultValuesRegistry, MockRegistry
from query_mock.core.responses import DefaultValuesResponse, ExecuteResponse, ItemsResponse
from query_mock.mocks.base import BaseMock
from query_mock.mocks.default_values import DefaultValuesMock
from query_mock.mocks.items import ItemsMock, ScalarMock
from query_mock.mocks.saving import SavingItemMock

logger = logging.getLogger(__name__)


class DataProviderMock:
    """In-memory data provider answering queries from registered mocks.

    Args:
        config: Optional ProviderConfig. Defaults to non-strict mode with
            payload copying enabled.
    """

    def __init__(self, config: ProviderConfig | None = None) -> None:
        self.config = config or ProviderConfig()
        self._default_values_mocks = DefaultValuesRegistry()
        self._collection_items_mocks: MockRegistry[ItemsMock] = MockRegistry()
        self._scalar_items_mocks: MockRegistry[ScalarMock] = MockRegistry()
        self._batch_item_mocks: MockRegistry[SavingItemMock] = MockRegistry()
        self._engine = MatchingEngine(
            self._collection_items_mocks,
            self._scalar_items_mocks,
            self._batch_item_mocks,
        )

    @classmethod
    def from_config(cls, config: Any) -> DataProviderMock:
        """Create a provider from a ProviderConfig or a plain dict of settings."""
        if not isinstance(config, ProviderConfig):
            config = ProviderConfig.model_validate(config)
        return cls(config)

    # --- Default values ---

    def mock_default_values(self, schema_name: str) -> DefaultValuesMock:
        """Return the default-values mock for *schema_name*, creating it on first call."""
        mock = self._default_values_mocks.get_or_create(schema_name)
        logger.debug("Registered %s", mock.describe())
        return mock

    def get_default_values(self, schema_name: str) -> DefaultValuesResponse | None:
        """Answer a default-values lookup, or None if the schema is not mocked."""
        mock = self._default_values_mocks.get(schema_name)
        if mock is None:
            logger.debug("No default values mock for '%s'", schema_name)
            return None
        mock.on_received()
        return mock.get_result(copy_results=self.config.copy_results)

    # --- Select queries ---

    def mock_items(self, schema_name: str) -> ItemsMock:
        """Register a new collection mock for *schema_name*."""
        mock = self._collection_items_mocks.register(ItemsMock(schema_name))
        logger.debug("Registered %s", mock.describe())
        return mock

    def mock_scalar(self, schema_name: str, aggregation_type: AggregationType) -> ScalarMock:
        """Register a new scalar aggregate mock for *schema_name*."""
        mock = self._scalar_items_mocks.register(ScalarMock(schema_name, aggregation_type))
        logger.debug("Registered %s", mock.describe())
        return mock

    def get_items(self, query: SelectQuery) -> ItemsResponse | None:
        """Answer a select query from the first matching mock.

        Returns None when nothing matches, unless the provider is strict.

        Raises:
            ParameterExtractionError: If the query's filters cannot be extracted.
            UnmatchedQueryError: In strict mode, if no mock matches.
        """
        mock = self._engine.match_select(query)
        if mock is None:
            if self.config.strict:
                raise UnmatchedQueryError(query.root_schema_name)
            return None

        mock.on_received()
        logger.debug("Matched %s (received %d)", mock.describe(), mock.received_count)
        return mock.get_result(copy_results=self.config.copy_results)

    # --- Batch ---

    def mock_saving_item(self, schema_name: str, operation: SavingOperation) -> SavingItemMock:
        """Register a new saving-item mock for a batch mutation."""
        mock = self._batch_item_mocks.register(SavingItemMock(schema_name, operation))
        logger.debug("Registered %s", mock.describe())
        return mock

    def batch_execute(self, queries: Sequence[BatchQuery]) -> ExecuteResponse:
        """Receive each mutation in order against the saving-item mocks.

        Unmatched mutations are ignored. The response is always successful
        with no per-query results.

        Raises:
            UnsupportedQueryError: If a query is not an insert, update or delete.
            ParameterExtractionError: If a query's values or filters cannot be extracted.
        """
        for query in queries:
            mock = self._engine.match_saving(query)
            if mock is not None:
                mock.on_received()
                logger.debug("Matched %s (received %d)", mock.describe(), mock.received_count)
        return ExecuteResponse(success=True, error_message="", query_results=[])

    # --- Verification ---

    @property
    def mocks(self) -> list[BaseMock]:
        """All registered mocks: default values, collections, scalars, saving items."""
        return [
            *self._default_values_mocks,
            *self._collection_items_mocks,
            *self._scalar_items_mocks,
            *self._batch_item_mocks,
        ]

    def unreceived_mocks(self) -> list[BaseMock]:
        """Registered mocks that have not answered any query yet."""
        return [mock for mock in self.mocks if not mock.received]

    def verify_all_received(self) -> None:
        """Raise if any registered mock was never received.

        Raises:
            MockNotReceivedError: Listing every unreceived mock.
        """
        pending = self.unreceived_mocks()
        if pending:
            raise MockNotReceivedError([mock.describe() for mock in pending])
