"""QueryMock exception hierarchy.

A query that matches no registered mock is not an error: the read path
returns None and the write path does nothing. Only malformed queries,
misconfigured mocks and failed verifications raise.
"""

from __future__ import annotations


class QueryMockError(Exception):
    """Base exception for all QueryMock errors."""


# --- Extraction ---


class ParameterExtractionError(QueryMockError):
    """Raised when a query contains a shape the parameter extractor cannot normalize."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Cannot extract query parameters: {detail}")


# --- Dispatch ---


class UnsupportedQueryError(QueryMockError):
    """Raised when a query is routed to an entry point that cannot handle its type."""

    def __init__(self, query_type: str) -> None:
        self.query_type = query_type
        super().__init__(f"Unsupported query type: '{query_type}'")


class UnmatchedQueryError(QueryMockError):
    """Raised in strict mode when a read query matches no registered mock."""

    def __init__(self, schema_name: str) -> None:
        self.schema_name = schema_name
        super().__init__(f"No mock registered for query on schema '{schema_name}'")


# --- Mocks ---


class MockConfigurationError(QueryMockError):
    """Raised when a mock is registered or built with invalid arguments."""


class MockNotReceivedError(QueryMockError):
    """Raised by verification when registered mocks were never received."""

    def __init__(self, descriptions: list[str]) -> None:
        self.descriptions = descriptions
        listing = "\n".join(f"  - {d}" for d in descriptions)
        super().__init__(f"{len(descriptions)} registered mock(s) never received:\n{listing}")
