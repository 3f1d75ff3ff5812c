"""Structured query objects.

Frozen dataclasses describing the select / insert / update / delete queries
a data-access layer hands to its provider. Only the parts the mock provider
reads are modelled: root schema, projected columns, filter tree and column
assignments.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from query_mock.core.enums import AggregationType, ComparisonType, LogicalOperation


@dataclass(frozen=True)
class Parameter:
    """A typed literal value, as produced by query builders."""

    value: Any
    data_type: str | None = None


@dataclass(frozen=True)
class Column:
    """A projected column expression."""

    path: str
    aggregation: AggregationType = AggregationType.NONE
    alias: str | None = None


@dataclass(frozen=True)
class Filter:
    """A single condition: ``path <comparison> value``."""

    path: str
    value: Any = None
    comparison: ComparisonType = ComparisonType.EQUAL


@dataclass(frozen=True)
class FilterGroup:
    """A group of filters and nested groups."""

    items: tuple[Filter | FilterGroup, ...] = ()
    logical_operation: LogicalOperation = LogicalOperation.AND


def where(
    *items: Filter | FilterGroup,
    logical_operation: LogicalOperation = LogicalOperation.AND,
) -> FilterGroup:
    """Build a filter group from positional filters."""
    return FilterGroup(items=tuple(items), logical_operation=logical_operation)


@dataclass(frozen=True)
class SelectQuery:
    """Read query against a single root schema."""

    root_schema_name: str
    columns: tuple[Column, ...] = ()
    filters: FilterGroup | None = None


@dataclass(frozen=True)
class InsertQuery:
    root_schema_name: str
    column_values: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateQuery:
    root_schema_name: str
    column_values: Mapping[str, Any] = field(default_factory=dict)
    filters: FilterGroup | None = None


@dataclass(frozen=True)
class DeleteQuery:
    root_schema_name: str
    filters: FilterGroup | None = None


# Closed set of queries accepted by batch execution
BatchQuery = Union[InsertQuery, UpdateQuery, DeleteQuery]
