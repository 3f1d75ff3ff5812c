"""Query matching engine.

The engine picks the registry an incoming query belongs to, extracts the
query's parameters and returns the first registered mock that matches.
It never marks mocks received; that is left to the provider.
"""

from __future__ import annotations

import logging

from query_mock.core.enums import AggregationType, SavingOperation
from query_mock.core.exceptions import ParameterExtractionError, UnsupportedQueryError
from query_mock.core.params import extract_column_values, extract_parameters
from query_mock.core.query import DeleteQuery, InsertQuery, SelectQuery, UpdateQuery
from query_mock.core.registry import MockRegistry
from query_mock.mocks.base import ResponseMock
from query_mock.mocks.items import ItemsMock, ScalarMock
from query_mock.mocks.saving import SavingItemMock

logger = logging.getLogger(__name__)


def scalar_aggregation(query: SelectQuery) -> AggregationType | None:
    """Return the aggregation of a scalar query, or None for collection queries.

    A query is scalar when it projects exactly one column and that column
    applies an aggregate function.

    Raises:
        ParameterExtractionError: If a column carries an unknown aggregation.
    """
    for column in query.columns:
        if not isinstance(column.aggregation, AggregationType):
            raise ParameterExtractionError(
                f"unsupported aggregation {column.aggregation!r} on column '{column.path}'"
            )
    if len(query.columns) != 1:
        return None
    aggregation = query.columns[0].aggregation
    if aggregation is AggregationType.NONE:
        return None
    return aggregation


def is_scalar_query(query: SelectQuery) -> bool:
    """Return True if *query* projects a single aggregated column."""
    return scalar_aggregation(query) is not None


class MatchingEngine:
    """Stateless matcher over the registries it is given."""

    def __init__(
        self,
        collection_registry: MockRegistry[ItemsMock],
        scalar_registry: MockRegistry[ScalarMock],
        saving_registry: MockRegistry[SavingItemMock],
    ) -> None:
        self._collection_registry = collection_registry
        self._scalar_registry = scalar_registry
        self._saving_registry = saving_registry

    def match_select(self, query: SelectQuery) -> ResponseMock | None:
        """Find the mock answering a select query.

        Scalar queries are matched against scalar mocks only and never fall
        back to collection mocks, even when none matches.

        Raises:
            UnsupportedQueryError: If *query* is not a select query.
            ParameterExtractionError: If filters or column aggregations are malformed.
        """
        if not isinstance(query, SelectQuery):
            raise UnsupportedQueryError(type(query).__name__)

        parameters = extract_parameters(query)
        aggregation = scalar_aggregation(query)

        mock: ResponseMock | None
        if aggregation is not None:
            mock = self._scalar_registry.find(
                query.root_schema_name,
                lambda m: m.aggregation_type is aggregation and m.check_by_parameters(parameters),
            )
        else:
            mock = self._collection_registry.find(
                query.root_schema_name,
                lambda m: m.check_by_parameters(parameters),
            )

        if mock is None:
            logger.debug(
                "No %s mock matched select on '%s' with filters %s",
                "scalar" if aggregation is not None else "collection",
                query.root_schema_name,
                parameters,
            )
        return mock

    def match_saving(self, query: InsertQuery | UpdateQuery | DeleteQuery) -> SavingItemMock | None:
        """Find the saving-item mock expecting a mutation query.

        Raises:
            UnsupportedQueryError: If *query* is not an insert, update or delete.
        """
        match query:
            case InsertQuery():
                column_values = extract_column_values(query)
                mock = self._saving_registry.find(
                    query.root_schema_name,
                    lambda m: m.operation is SavingOperation.INSERT
                    and m.check_by_column_values(column_values),
                )
            case UpdateQuery():
                column_values = extract_column_values(query)
                parameters = extract_parameters(query)
                mock = self._saving_registry.find(
                    query.root_schema_name,
                    lambda m: m.operation is SavingOperation.UPDATE
                    and m.check_by_column_values(column_values)
                    and m.check_by_parameters(parameters),
                )
            case DeleteQuery():
                parameters = extract_parameters(query)
                mock = self._saving_registry.find(
                    query.root_schema_name,
                    lambda m: m.operation is SavingOperation.DELETE
                    and m.check_by_parameters(parameters),
                )
            case _:
                raise UnsupportedQueryError(type(query).__name__)

        if mock is None:
            logger.debug(
                "No saving mock matched %s on '%s'",
                type(query).__name__,
                query.root_schema_name,
            )
        return mock
