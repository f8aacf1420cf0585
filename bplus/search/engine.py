"""Aggregation engine: bounded fan-out, per-provider deadlines, merge and rank."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Iterable, Sequence

from loguru import logger

from bplus.search.errors import InvalidQueryError, ProviderTimeoutError
from bplus.search.models import ProviderOutcome, QueryOptions, SearchResult
from bplus.search.providers.base import SearchProvider

DEFAULT_MAX_CONCURRENCY = 4


def dedup_key(url: str) -> str:
    """Drop everything from the first `?` or `#` onward."""
    for i, ch in enumerate(url):
        if ch in "?#":
            return url[:i]
    return url


def merge_results(batches: Iterable[Iterable[SearchResult]]) -> list[SearchResult]:
    """
    Flatten result batches keeping the first result seen per dedup key.

    Batches must already be in provider registration order. Later duplicates
    are dropped even when they carry a richer snippet.
    """
    seen: dict[str, SearchResult] = {}
    for batch in batches:
        for result in batch:
            if not result.is_usable():
                continue
            key = dedup_key(result.url)
            if key not in seen:
                seen[key] = result
    return list(seen.values())


def rank_results(query: str, results: Sequence[SearchResult]) -> list[SearchResult]:
    """Stable partition: titles containing the query come first."""
    needle = query.lower()
    matched = [r for r in results if needle in r.title.lower()]
    rest = [r for r in results if needle not in r.title.lower()]
    return matched + rest


class AggregationEngine:
    """Fan a query out to registered providers and merge what comes back."""

    def __init__(
        self,
        providers: Sequence[SearchProvider],
        *,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self.providers = list(providers)
        self.max_concurrency = max_concurrency

    @property
    def provider_names(self) -> list[str]:
        return [p.name for p in self.providers]

    async def aggregate(
        self,
        query: str,
        options: QueryOptions | None = None,
    ) -> list[SearchResult]:
        """Search every provider and return deduplicated, ranked results."""
        outcomes = await self.run(query, options)
        merged = merge_results(o.results for o in outcomes)
        ranked = rank_results(query.strip(), merged)
        logger.info(
            "Search '{}': {} results from {}/{} providers",
            query[:80],
            len(ranked),
            sum(1 for o in outcomes if o.ok),
            len(outcomes),
        )
        return ranked

    async def run(
        self,
        query: str,
        options: QueryOptions | None = None,
    ) -> list[ProviderOutcome]:
        """Run every provider to a terminal state; outcomes keep registration order."""
        if not isinstance(query, str) or not query.strip():
            raise InvalidQueryError("query must not be empty")
        opts = options or QueryOptions()
        # One gate per call so concurrent aggregations do not share admission.
        gate = asyncio.Semaphore(self.max_concurrency)
        tasks = [self._run_one(gate, provider, query.strip(), opts) for provider in self.providers]
        return list(await asyncio.gather(*tasks))

    async def _run_one(
        self,
        gate: asyncio.Semaphore,
        provider: SearchProvider,
        query: str,
        options: QueryOptions,
    ) -> ProviderOutcome:
        async with gate:
            started = time.monotonic()
            try:
                results = await asyncio.wait_for(
                    provider.search(query, options),
                    timeout=options.timeout_s,
                )
            except asyncio.TimeoutError:
                error = ProviderTimeoutError(provider.name, options.timeout_ms)
                logger.warning("{}", error)
                return ProviderOutcome(
                    engine=provider.name,
                    status="timeout",
                    elapsed_ms=_elapsed_ms(started),
                    error=str(error),
                )
            except Exception as e:
                logger.warning("{} search raised: {}", provider.name, e)
                return ProviderOutcome(
                    engine=provider.name,
                    status="failed",
                    elapsed_ms=_elapsed_ms(started),
                    error=str(e),
                )

        kept = [r for r in results or [] if isinstance(r, SearchResult) and r.is_usable()]
        elapsed = _elapsed_ms(started)
        logger.debug("{} returned {} results in {} ms", provider.name, len(kept), elapsed)
        return ProviderOutcome(engine=provider.name, status="ok", results=kept, elapsed_ms=elapsed)


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)
