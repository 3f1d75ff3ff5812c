"""Unit tests for MatchingEngine."""

from __future__ import annotations

import pytest

from query_mock.core.engine import MatchingEngine, is_scalar_query, scalar_aggregation
from query_mock.core.enums import AggregationType, SavingOperation
from query_mock.core.exceptions import ParameterExtractionError, UnsupportedQueryError
from query_mock.core.query import (
    Column,
    DeleteQuery,
    Filter,
    FilterGroup,
    InsertQuery,
    SelectQuery,
    UpdateQuery,
    where,
)
from query_mock.core.registry import MockRegistry
from query_mock.mocks.items import ItemsMock, ScalarMock
from query_mock.mocks.saving import SavingItemMock


@pytest.fixture
def registries() -> tuple[
    MockRegistry[ItemsMock], MockRegistry[ScalarMock], MockRegistry[SavingItemMock]
]:
    return MockRegistry(), MockRegistry(), MockRegistry()


@pytest.fixture
def engine(registries) -> MatchingEngine:
    return MatchingEngine(*registries)


class TestScalarDetection:
    def test_single_aggregated_column(self) -> None:
        query = SelectQuery("Contact", columns=(Column("Id", AggregationType.COUNT),))
        assert scalar_aggregation(query) is AggregationType.COUNT
        assert is_scalar_query(query) is True

    def test_single_plain_column(self) -> None:
        assert is_scalar_query(SelectQuery("Contact", columns=(Column("Id"),))) is False

    def test_several_columns_with_aggregate(self) -> None:
        query = SelectQuery(
            "Contact",
            columns=(Column("Id", AggregationType.COUNT), Column("Name")),
        )
        assert is_scalar_query(query) is False

    def test_no_columns(self) -> None:
        assert is_scalar_query(SelectQuery("Contact")) is False

    def test_unknown_aggregation_on_any_column(self) -> None:
        query = SelectQuery(
            "Contact",
            columns=(Column("Id"), Column("Amount", aggregation="sum")),  # type: ignore[arg-type]
        )
        with pytest.raises(ParameterExtractionError, match="Amount"):
            scalar_aggregation(query)


class TestMatchSelect:
    def test_collection_match(self, engine: MatchingEngine, registries, select_query) -> None:
        items, _, _ = registries
        mock = items.register(ItemsMock("Contact").filter_has("Name", "Alice"))
        assert engine.match_select(select_query("Contact", Name="Alice")) is mock

    def test_collection_no_match(self, engine: MatchingEngine, registries, select_query) -> None:
        items, _, _ = registries
        items.register(ItemsMock("Contact").filter_has("Name", "Alice"))
        assert engine.match_select(select_query("Contact", Name="Bob")) is None

    def test_wildcard(self, engine: MatchingEngine, registries, select_query) -> None:
        items, _, _ = registries
        mock = items.register(ItemsMock("Contact"))
        assert engine.match_select(select_query("Contact")) is mock
        assert engine.match_select(select_query("Contact", Name="Bob", Age=3)) is mock
        assert engine.match_select(select_query("Account")) is None

    def test_first_registered_wins(self, engine: MatchingEngine, registries, select_query) -> None:
        items, _, _ = registries
        first = items.register(ItemsMock("Contact").filter_has("Name", "Alice"))
        items.register(ItemsMock("Contact"))
        assert engine.match_select(select_query("Contact", Name="Alice")) is first

    def test_specific_after_wildcard_never_wins(
        self, engine: MatchingEngine, registries, select_query
    ) -> None:
        items, _, _ = registries
        wildcard = items.register(ItemsMock("Contact"))
        items.register(ItemsMock("Contact").filter_has("Name", "Alice"))
        assert engine.match_select(select_query("Contact", Name="Alice")) is wildcard

    def test_scalar_match_requires_aggregation(
        self, engine: MatchingEngine, registries, select_query
    ) -> None:
        _, scalars, _ = registries
        scalars.register(ScalarMock("Contact", AggregationType.SUM))
        count = scalars.register(ScalarMock("Contact", AggregationType.COUNT))
        query = select_query("Contact", aggregation=AggregationType.COUNT)
        assert engine.match_select(query) is count

    def test_scalar_filters(self, engine: MatchingEngine, registries, select_query) -> None:
        _, scalars, _ = registries
        mock = scalars.register(
            ScalarMock("Contact", AggregationType.COUNT).filter_has("City", "Paris")
        )
        assert engine.match_select(
            select_query("Contact", aggregation=AggregationType.COUNT, City="Paris")
        ) is mock
        assert engine.match_select(
            select_query("Contact", aggregation=AggregationType.COUNT, City="Rome")
        ) is None

    def test_scalar_never_falls_back_to_collection(
        self, engine: MatchingEngine, registries, select_query
    ) -> None:
        items, _, _ = registries
        items.register(ItemsMock("Contact"))
        query = select_query("Contact", aggregation=AggregationType.COUNT)
        assert engine.match_select(query) is None

    def test_collection_ignores_scalar_mocks(
        self, engine: MatchingEngine, registries, select_query
    ) -> None:
        _, scalars, _ = registries
        scalars.register(ScalarMock("Contact", AggregationType.COUNT))
        assert engine.match_select(select_query("Contact")) is None

    def test_extraction_error_propagates(self, engine: MatchingEngine, registries) -> None:
        items, _, _ = registries
        items.register(ItemsMock("Contact"))
        query = SelectQuery("Contact", filters=FilterGroup(items=(object(),)))  # type: ignore[arg-type]
        with pytest.raises(ParameterExtractionError):
            engine.match_select(query)

    def test_unknown_aggregation_rejected(self, engine: MatchingEngine, registries) -> None:
        items, _, _ = registries
        items.register(ItemsMock("Contact"))
        query = SelectQuery("Contact", columns=(Column("Id", aggregation="none"),))  # type: ignore[arg-type]
        with pytest.raises(ParameterExtractionError, match="aggregation"):
            engine.match_select(query)

    def test_non_select_rejected(self, engine: MatchingEngine) -> None:
        with pytest.raises(UnsupportedQueryError, match="DeleteQuery"):
            engine.match_select(DeleteQuery("Contact"))  # type: ignore[arg-type]


class TestMatchSaving:
    def test_insert(self, engine: MatchingEngine, registries) -> None:
        _, _, saving = registries
        mock = saving.register(
            SavingItemMock("Contact", SavingOperation.INSERT).changed_value_has("Name", "Alice")
        )
        assert engine.match_saving(InsertQuery("Contact", {"Name": "Alice"})) is mock
        assert engine.match_saving(InsertQuery("Contact", {"Name": "Bob"})) is None

    def test_operation_must_match(self, engine: MatchingEngine, registries) -> None:
        _, _, saving = registries
        saving.register(SavingItemMock("Contact", SavingOperation.UPDATE))
        assert engine.match_saving(InsertQuery("Contact", {"Name": "Alice"})) is None

    def test_update_requires_values_and_filters(self, engine: MatchingEngine, registries) -> None:
        _, _, saving = registries
        mock = saving.register(
            SavingItemMock("Contact", SavingOperation.UPDATE)
            .changed_value_has("Name", "Bob")
            .filter_has("Id", 1)
        )
        both = UpdateQuery("Contact", {"Name": "Bob"}, where(Filter("Id", 1)))
        values_only = UpdateQuery("Contact", {"Name": "Bob"}, where(Filter("Id", 2)))
        filter_only = UpdateQuery("Contact", {"Name": "Carl"}, where(Filter("Id", 1)))
        assert engine.match_saving(both) is mock
        assert engine.match_saving(values_only) is None
        assert engine.match_saving(filter_only) is None

    def test_delete_ignores_column_values(self, engine: MatchingEngine, registries) -> None:
        _, _, saving = registries
        mock = saving.register(
            SavingItemMock("Contact", SavingOperation.DELETE)
            .changed_value_has("Name", "ignored")
            .filter_has("Id", 1)
        )
        assert engine.match_saving(DeleteQuery("Contact", where(Filter("Id", 1)))) is mock
        assert engine.match_saving(DeleteQuery("Contact", where(Filter("Id", 2)))) is None

    def test_unsupported_query(self, engine: MatchingEngine) -> None:
        with pytest.raises(UnsupportedQueryError, match="SelectQuery"):
            engine.match_saving(SelectQuery("Contact"))  # type: ignore[arg-type]
