"""Configured search client with the registered provider set."""

from typing import TYPE_CHECKING

from bplus.search.engine import AggregationEngine
from bplus.search.errors import UnknownProviderError
from bplus.search.models import QueryOptions, SearchResult, Timeframe
from bplus.search.providers import PROVIDERS, SearchProvider
from bplus.search.suggest import SUGGEST_SOURCES, SuggestAggregator, SuggestSource

if TYPE_CHECKING:
    from bplus.config.schema import SearchConfig, SuggestConfig


class SearchClient:
    """Build the aggregation engine and suggest aggregator from configuration."""

    def __init__(
        self,
        search_config: "SearchConfig | None" = None,
        suggest_config: "SuggestConfig | None" = None,
    ):
        from bplus.config.schema import SearchConfig, SuggestConfig

        self.search_config = search_config or SearchConfig()
        self.suggest_config = suggest_config or SuggestConfig()
        self.engine = AggregationEngine(
            self._build_providers(),
            max_concurrency=self.search_config.max_concurrency,
        )
        self.suggester = SuggestAggregator(
            self._build_sources(),
            max_concurrency=self.search_config.max_concurrency,
            limit=self.suggest_config.limit,
        )

    @property
    def providers(self) -> list[str]:
        return self.engine.provider_names

    async def aggregate(
        self,
        query: str,
        *,
        timeframe: Timeframe | None = None,
        safesearch: bool | None = None,
        timeout_ms: int | None = None,
    ) -> list[SearchResult]:
        """Search all configured providers; config supplies unset options."""
        options = QueryOptions(
            timeframe=timeframe or None,
            safesearch=self.search_config.safesearch if safesearch is None else safesearch,
            timeout_ms=self.search_config.timeout_ms if timeout_ms is None else timeout_ms,
        )
        return await self.engine.aggregate(query, options)

    async def suggest(self, query: str) -> list[str]:
        return await self.suggester.suggest(query)

    def _build_providers(self) -> list[SearchProvider]:
        providers: list[SearchProvider] = []
        for name in self.search_config.providers:
            provider_cls = PROVIDERS.get(name.lower())
            if provider_cls is None:
                raise UnknownProviderError(f"unknown search provider: {name}")
            providers.append(provider_cls(user_agent=self.search_config.user_agent))
        return providers

    def _build_sources(self) -> list[SuggestSource]:
        sources: list[SuggestSource] = []
        for name in self.suggest_config.sources:
            source_cls = SUGGEST_SOURCES.get(name.lower())
            if source_cls is None:
                raise UnknownProviderError(f"unknown suggest source: {name}")
            sources.append(
                source_cls(
                    user_agent=self.search_config.user_agent,
                    timeout_ms=self.suggest_config.timeout_ms,
                )
            )
        return sources
