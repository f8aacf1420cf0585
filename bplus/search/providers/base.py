"""Provider adapter interface shared by every search backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import httpx
from loguru import logger

from bplus.search.models import QueryOptions, SearchResult

DEFAULT_USER_AGENT = "bplus-native/1.0"


class SearchProvider(ABC):
    """
    One public search backend.

    Subclasses build the request and map the provider's payload into
    `SearchResult` items. `search` never raises for remote failures; it
    degrades to an empty list so a single backend cannot abort aggregation.
    Cancellation (`asyncio.CancelledError`) always propagates.
    """

    name: str = ""
    base_url: str = ""
    max_results: int = 10

    def __init__(self, *, user_agent: str = DEFAULT_USER_AGENT, base_url: str | None = None):
        self.user_agent = user_agent
        if base_url:
            self.base_url = base_url

    async def search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        """Search and normalize results, returning [] on any ordinary failure."""
        try:
            results = await self._search(query, options)
        except Exception as e:
            logger.warning("{} search failed: {}", self.name, e)
            return []
        return [r for r in results if r.is_usable()][: self.max_results]

    @abstractmethod
    async def _search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        """Provider-specific request and parsing."""

    async def _get(self, params: dict[str, Any], options: QueryOptions) -> httpx.Response:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                self.base_url,
                params={k: v for k, v in params.items() if v is not None},
                headers={"User-Agent": self.user_agent},
                timeout=options.timeout_s,
            )
            response.raise_for_status()
        return response

    async def _get_json(self, params: dict[str, Any], options: QueryOptions) -> Any:
        response = await self._get(params, options)
        return response.json()

    async def _get_text(self, params: dict[str, Any], options: QueryOptions) -> str:
        response = await self._get(params, options)
        return response.text

    def _result(self, title: Any, url: Any, content: Any = "") -> SearchResult:
        return SearchResult(
            title=str(title or "").strip(),
            url=str(url or "").strip(),
            content=str(content or "").strip(),
            engine=self.name,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
