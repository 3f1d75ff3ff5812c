"""Provider configuration.

ProviderConfig is a Pydantic model so that test suites can build it from
keyword arguments, dicts or fixtures with validation.
"""

from __future__ import annotations

from pydantic import BaseModel


class ProviderConfig(BaseModel):
    """Configuration for a DataProviderMock.

    Attributes:
        strict: Raise UnmatchedQueryError when a read query matches no mock
            instead of returning None. Batch execution is unaffected.
        copy_results: Deep-copy canned payloads on every dispatch so callers
            cannot mutate the registered expectation.
    """

    strict: bool = False
    copy_results: bool = True
