"""Query parameter extraction.

Turns structured queries into flat, comparable parameter sets:

    filters:        path -> (FilterCondition, ...)
    column values:  column -> value

Typed literals are unwrapped and enum members reduced to their values, so
two semantically equal queries yield equal parameter sets however they
were built.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from query_mock.core.enums import ComparisonType
from query_mock.core.exceptions import ParameterExtractionError
from query_mock.core.query import (
    DeleteQuery,
    Filter,
    FilterGroup,
    InsertQuery,
    Parameter,
    SelectQuery,
    UpdateQuery,
)

_SCALAR_TYPES = (type(None), bool, int, float, Decimal, str, bytes, UUID, date, datetime, time)


@dataclass(frozen=True)
class FilterCondition:
    """Normalized form of a single filter: comparison plus value."""

    comparison: ComparisonType
    value: Any = None


QueryParameters = dict[str, tuple[FilterCondition, ...]]
ColumnValues = dict[str, Any]


def normalize_value(value: Any, *, allow_sequence: bool = True) -> Any:
    """Reduce *value* to a plain comparable scalar (or tuple of scalars).

    Raises:
        ParameterExtractionError: If the value is not a supported literal.
    """
    if isinstance(value, Parameter):
        value = value.value
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (list, tuple)):
        if not allow_sequence:
            raise ParameterExtractionError("nested sequences are not supported")
        return tuple(normalize_value(item, allow_sequence=False) for item in value)
    if isinstance(value, _SCALAR_TYPES):
        return value
    raise ParameterExtractionError(f"unsupported value of type '{type(value).__name__}'")


def _collect_filters(node: Any, result: dict[str, list[FilterCondition]]) -> None:
    """Depth-first walk of a filter tree, flattening groups."""
    if isinstance(node, FilterGroup):
        for item in node.items:
            _collect_filters(item, result)
        return

    if not isinstance(node, Filter):
        raise ParameterExtractionError(f"unsupported filter node '{type(node).__name__}'")
    if not isinstance(node.path, str) or not node.path:
        raise ParameterExtractionError("filter path must be a non-empty string")
    if not isinstance(node.comparison, ComparisonType):
        raise ParameterExtractionError(f"unsupported comparison {node.comparison!r} on '{node.path}'")

    condition = FilterCondition(node.comparison, normalize_value(node.value))
    result.setdefault(node.path, []).append(condition)


def extract_parameters(query: SelectQuery | UpdateQuery | DeleteQuery) -> QueryParameters:
    """Extract filter parameters from a query's condition tree.

    Args:
        query: Select, update or delete query.

    Returns:
        Mapping of field path to its conditions, in tree order. Empty if
        the query has no filters.

    Raises:
        ParameterExtractionError: If the query or any filter node has an
            unsupported shape.
    """
    if not isinstance(query, (SelectQuery, UpdateQuery, DeleteQuery)):
        raise ParameterExtractionError(
            f"'{type(query).__name__}' does not carry a filter condition"
        )

    collected: dict[str, list[FilterCondition]] = {}
    if query.filters is not None:
        _collect_filters(query.filters, collected)
    return {path: tuple(conditions) for path, conditions in collected.items()}


def extract_column_values(query: InsertQuery | UpdateQuery) -> ColumnValues:
    """Extract column assignments from an insert or update query."""
    if not isinstance(query, (InsertQuery, UpdateQuery)):
        raise ParameterExtractionError(
            f"'{type(query).__name__}' does not carry column values"
        )

    values: ColumnValues = {}
    for column, value in query.column_values.items():
        if not isinstance(column, str) or not column:
            raise ParameterExtractionError("column name must be a non-empty string")
        values[column] = normalize_value(value, allow_sequence=False)
    return values


def values_equal(left: Any, right: Any) -> bool:
    """Compare two normalized values, keeping bools distinct from numbers.

    ``True == 1`` holds in Python but a bool column and an int column are
    not the same value here.
    """
    if isinstance(left, tuple) and isinstance(right, tuple):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right, strict=True)
        )
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return bool(left == right)


def _condition_present(condition: FilterCondition, present: tuple[FilterCondition, ...]) -> bool:
    return any(
        other.comparison is condition.comparison and values_equal(other.value, condition.value)
        for other in present
    )


def contains_parameters(expected: QueryParameters, actual: QueryParameters) -> bool:
    """Return True if every expected condition appears under the same path in *actual*.

    Paths absent from *expected* are unconstrained; an empty *expected*
    matches anything.
    """
    for path, conditions in expected.items():
        present = actual.get(path, ())
        if not all(_condition_present(condition, present) for condition in conditions):
            return False
    return True


def contains_column_values(expected: ColumnValues, actual: ColumnValues) -> bool:
    """Return True if *expected* is a subset of *actual* (key and value)."""
    return all(
        column in actual and values_equal(actual[column], value)
        for column, value in expected.items()
    )
