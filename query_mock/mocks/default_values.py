"""Default-values mock.

Default values are looked up by schema only, so this mock carries no
filter predicates and there is at most one per schema.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from query_mock.core.enums import ComparisonType
from query_mock.core.exceptions import MockConfigurationError
from query_mock.core.responses import DefaultValuesResponse
from query_mock.mocks.base import ResponseMock


class DefaultValuesMock(ResponseMock):
    """Answers default-values lookups with a column -> value dict."""

    def filter_has(
        self,
        path: str,
        value: Any,
        comparison: ComparisonType = ComparisonType.EQUAL,
    ) -> DefaultValuesMock:
        raise MockConfigurationError("Default values mocks are matched by schema name only")

    def get_result(self, *, copy_results: bool = True) -> DefaultValuesResponse:
        if self._error_message is not None:
            return DefaultValuesResponse(success=False, error_message=self._error_message)

        values = self._payload(copy_results)
        try:
            return DefaultValuesResponse(values=values if values is not None else {})
        except ValidationError as e:
            raise MockConfigurationError(
                f"{self.describe()} must return a dict of column values: {e}"
            ) from e
