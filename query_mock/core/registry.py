"""Mock registries.

Two container policies:

    MockRegistry           ordered, append-only; first match wins
    DefaultValuesRegistry  keyed by schema name; at most one mock per schema
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from query_mock.mocks.base import BaseMock
from query_mock.mocks.default_values import DefaultValuesMock

M = TypeVar("M", bound=BaseMock)


class MockRegistry(Generic[M]):
    """Ordered, append-only collection of mocks of one kind.

    Insertion order is match precedence: ``find`` returns the earliest
    registered mock that satisfies the predicate. Mocks are never reordered
    or removed, so the same mock can be found any number of times.
    """

    def __init__(self) -> None:
        self._mocks: list[M] = []

    def register(self, mock: M) -> M:
        """Append *mock* and return it for builder chaining."""
        self._mocks.append(mock)
        return mock

    def find(self, schema_name: str, predicate: Callable[[M], bool]) -> M | None:
        """Return the first mock for *schema_name* accepted by *predicate*, or None."""
        for mock in self._mocks:
            if mock.schema_name == schema_name and predicate(mock):
                return mock
        return None

    def __iter__(self) -> Iterator[M]:
        return iter(list(self._mocks))

    def __len__(self) -> int:
        """Number of registered mocks."""
        return len(self._mocks)


class DefaultValuesRegistry:
    """Default-values mocks keyed by schema name."""

    def __init__(self) -> None:
        self._mocks: dict[str, DefaultValuesMock] = {}

    def register(self, mock: DefaultValuesMock) -> DefaultValuesMock:
        """Store *mock*, replacing any mock already registered for its schema."""
        self._mocks[mock.schema_name] = mock
        return mock

    def get_or_create(self, schema_name: str) -> DefaultValuesMock:
        """Return the mock for *schema_name*, registering a new one if absent."""
        mock = self._mocks.get(schema_name)
        if mock is None:
            mock = self.register(DefaultValuesMock(schema_name))
        return mock

    def get(self, schema_name: str) -> DefaultValuesMock | None:
        """Return the mock for *schema_name*, or None if not registered."""
        return self._mocks.get(schema_name)

    def has(self, schema_name: str) -> bool:
        """Check if a mock is registered for *schema_name*."""
        return schema_name in self._mocks

    @property
    def schema_names(self) -> list[str]:
        """Schemas with a registered mock, in registration order."""
        return list(self._mocks.keys())

    def __iter__(self) -> Iterator[DefaultValuesMock]:
        return iter(list(self._mocks.values()))

    def __len__(self) -> int:
        return len(self._mocks)
