"""Search error types."""


class SearchError(Exception):
    """Base error for search aggregation."""


class InvalidQueryError(SearchError, ValueError):
    """Raised when a query or its options cannot form a task set."""


class ProviderTimeoutError(SearchError):
    """Raised internally when a provider misses its deadline."""

    def __init__(self, engine: str, timeout_ms: int):
        super().__init__(f"{engine} timed out after {timeout_ms} ms")
        self.engine = engine
        self.timeout_ms = timeout_ms


class UnknownProviderError(SearchError):
    """Raised when configuration names a provider that is not registered."""
