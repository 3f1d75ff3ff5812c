"""Query and mock enumerations."""

from __future__ import annotations

from enum import Enum


class AggregationType(Enum):
    """Aggregate function applied to a projected column."""

    NONE = "none"
    COUNT = "count"
    SUM = "sum"
    AVG = "avg"
    MIN = "min"
    MAX = "max"


class ComparisonType(Enum):
    """Comparison operator of a single filter condition."""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    GREATER = "greater"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS = "less"
    LESS_OR_EQUAL = "less_or_equal"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
    CONTAINS = "contains"
    START_WITH = "start_with"
    END_WITH = "end_with"
    IN = "in"


class LogicalOperation(Enum):
    """How the items of a filter group are combined."""

    AND = "and"
    OR = "or"


class SavingOperation(Enum):
    """Kind of mutation a saving-item mock expects."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
