"""Multi-provider search aggregation."""

from bplus.search.client import SearchClient
from bplus.search.engine import AggregationEngine, dedup_key, merge_results, rank_results
from bplus.search.errors import (
    InvalidQueryError,
    ProviderTimeoutError,
    SearchError,
    UnknownProviderError,
)
from bplus.search.formatting import format_results, format_results_context
from bplus.search.models import ProviderOutcome, QueryOptions, SearchResult
from bplus.search.suggest import SuggestAggregator, SuggestSource, vote

__all__ = [
    "AggregationEngine",
    "InvalidQueryError",
    "ProviderOutcome",
    "ProviderTimeoutError",
    "QueryOptions",
    "SearchClient",
    "SearchError",
    "SearchResult",
    "SuggestAggregator",
    "SuggestSource",
    "UnknownProviderError",
    "dedup_key",
    "format_results",
    "format_results_context",
    "merge_results",
    "rank_results",
    "vote",
]
