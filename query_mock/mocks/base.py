"""Mock specification base classes.

A mock is one registered expectation: the schema it applies to, the filter
predicates an incoming query must satisfy, what to answer with and how
many times it was received. Predicates and results are declared through a
fluent builder right after registration; afterwards only the received
counter changes.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any, TypeVar

from query_mock.core.enums import ComparisonType
from query_mock.core.exceptions import MockConfigurationError, ParameterExtractionError
from query_mock.core.params import (
    FilterCondition,
    QueryParameters,
    contains_parameters,
    normalize_value,
)

M = TypeVar("M", bound="BaseMock")
R = TypeVar("R", bound="ResponseMock")


class BaseMock:
    """Schema, filter predicates and received state shared by all mocks.

    Args:
        schema_name: Name of the schema the mock applies to.

    Raises:
        MockConfigurationError: If schema_name is empty.
    """

    def __init__(self, schema_name: str) -> None:
        if not isinstance(schema_name, str) or not schema_name:
            raise MockConfigurationError("Mock schema name must be a non-empty string")
        self._schema_name = schema_name
        self._filters: dict[str, list[FilterCondition]] = {}
        self._received_count = 0

    @property
    def schema_name(self) -> str:
        return self._schema_name

    @property
    def received_count(self) -> int:
        """Number of queries this mock has answered."""
        return self._received_count

    @property
    def received(self) -> bool:
        return self._received_count > 0

    @property
    def filters(self) -> QueryParameters:
        """Registered filter predicates, path -> conditions."""
        return {path: tuple(conditions) for path, conditions in self._filters.items()}

    def filter_has(
        self: M,
        path: str,
        value: Any,
        comparison: ComparisonType = ComparisonType.EQUAL,
    ) -> M:
        """Require the query filter to contain ``path <comparison> value``."""
        if not isinstance(path, str) or not path:
            raise MockConfigurationError("Filter path must be a non-empty string")
        if not isinstance(comparison, ComparisonType):
            raise MockConfigurationError(f"Unsupported comparison {comparison!r} for '{path}'")
        try:
            normalized = normalize_value(value)
        except ParameterExtractionError as e:
            raise MockConfigurationError(f"Invalid filter value for '{path}': {e.detail}") from e
        self._filters.setdefault(path, []).append(FilterCondition(comparison, normalized))
        return self

    def check_by_parameters(self, parameters: QueryParameters) -> bool:
        """Return True if every registered filter predicate is present in *parameters*."""
        return contains_parameters(self.filters, parameters)

    def on_received(self) -> None:
        """Record one consumption of this mock."""
        self._received_count += 1

    def describe(self) -> str:
        """Short human-readable description used in logs and verification errors."""
        parts = [f"{type(self).__name__}('{self._schema_name}')"]
        if self._filters:
            parts.append(f"filters={self.filters}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"<{self.describe()} received={self._received_count}>"


class ResponseMock(BaseMock):
    """A mock that answers with a canned payload, a payload factory or an error."""

    def __init__(self, schema_name: str) -> None:
        super().__init__(schema_name)
        self._result: Any = None
        self._factory: Callable[[], Any] | None = None
        self._error_message: str | None = None

    def returns(self: R, value: Any) -> R:
        """Answer with *value*."""
        self._result = value
        self._factory = None
        self._error_message = None
        return self

    def returns_using(self: R, factory: Callable[[], Any]) -> R:
        """Answer with whatever *factory* returns, called once per dispatch."""
        if not callable(factory):
            raise MockConfigurationError(f"Result factory must be callable, got {factory!r}")
        self._factory = factory
        self._result = None
        self._error_message = None
        return self

    def returns_error(self: R, message: str) -> R:
        """Answer with a failed response carrying *message*."""
        self._error_message = message
        self._result = None
        self._factory = None
        return self

    @property
    def is_error(self) -> bool:
        return self._error_message is not None

    def _payload(self, copy_results: bool) -> Any:
        """Build the canned payload for one dispatch."""
        if self._factory is not None:
            return self._factory()
        if copy_results:
            return copy.deepcopy(self._result)
        return self._result

    def get_result(self, *, copy_results: bool = True) -> Any:
        """Build the response object for one dispatch.

        Subclasses must override this; the base class has no response shape.
        """
        raise NotImplementedError(f"{type(self).__name__} does not build responses")
