"""Mock specifications - registered expectations and their canned results."""

from __future__ import annotations

from query_mock.mocks.base import BaseMock, ResponseMock
from query_mock.mocks.default_values import DefaultValuesMock
from query_mock.mocks.items import ItemsMock, ScalarMock
from query_mock.mocks.saving import SavingItemMock

__all__ = [
    "BaseMock",
    "ResponseMock",
    "ItemsMock",
    "ScalarMock",
    "DefaultValuesMock",
    "SavingItemMock",
]
