"""Autosuggest fan-out merged by frequency vote."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

import httpx
from loguru import logger

from bplus.search.providers.base import DEFAULT_USER_AGENT

DEFAULT_SUGGEST_LIMIT = 10
DEFAULT_SUGGEST_TIMEOUT_MS = 5000


class SuggestSource(ABC):
    """One completion endpoint; `suggest` returns [] on any ordinary failure."""

    name: str = ""
    base_url: str = ""

    def __init__(
        self,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_ms: int = DEFAULT_SUGGEST_TIMEOUT_MS,
    ):
        self.user_agent = user_agent
        self.timeout_ms = timeout_ms

    async def suggest(self, query: str) -> list[str]:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.base_url,
                    params=self.params(query),
                    headers={"User-Agent": self.user_agent},
                    timeout=self.timeout_ms / 1000,
                )
                response.raise_for_status()
            items = self.parse(response.json())
        except Exception as e:
            logger.warning("{} suggest failed: {}", self.name, e)
            return []
        return [s for s in items if isinstance(s, str) and s]

    @abstractmethod
    def params(self, query: str) -> dict[str, Any]:
        """Query-string parameters for the endpoint."""

    @abstractmethod
    def parse(self, payload: Any) -> list[Any]:
        """Extract candidate strings from the decoded payload."""


class OpenSearchSource(SuggestSource):
    """Endpoints answering in the OpenSearch `[query, [completions], ...]` shape."""

    def parse(self, payload: Any) -> list[Any]:
        if isinstance(payload, list) and len(payload) > 1 and isinstance(payload[1], list):
            return payload[1]
        return []


class DuckDuckGoSuggest(OpenSearchSource):
    name = "duckduckgo"
    base_url = "https://duckduckgo.com/ac/"

    def params(self, query: str) -> dict[str, Any]:
        return {"type": "list", "q": query}


class BraveSuggest(OpenSearchSource):
    name = "brave"
    base_url = "https://search.brave.com/api/suggest"

    def params(self, query: str) -> dict[str, Any]:
        return {"q": query}


class WikipediaSuggest(OpenSearchSource):
    name = "wikipedia"
    base_url = "https://en.wikipedia.org/w/api.php"

    def params(self, query: str) -> dict[str, Any]:
        return {
            "action": "opensearch",
            "format": "json",
            "formatversion": "2",
            "namespace": "0",
            "limit": "10",
            "search": query,
        }


class QwantSuggest(SuggestSource):
    name = "qwant"
    base_url = "https://api.qwant.com/v3/suggest"

    def params(self, query: str) -> dict[str, Any]:
        return {"q": query, "locale": "en_US", "version": "2"}

    def parse(self, payload: Any) -> list[Any]:
        if not isinstance(payload, dict) or payload.get("status") != "success":
            return []
        items = (payload.get("data") or {}).get("items") or []
        return [item.get("value") for item in items if isinstance(item, dict)]


SUGGEST_SOURCES: dict[str, type[SuggestSource]] = {
    "duckduckgo": DuckDuckGoSuggest,
    "brave": BraveSuggest,
    "qwant": QwantSuggest,
    "wikipedia": WikipediaSuggest,
}


def vote(candidates: Iterable[str], limit: int = DEFAULT_SUGGEST_LIMIT) -> list[str]:
    """Order by occurrence count desc, then alphabetically; keep `limit`."""
    counts = Counter(candidates)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [text for text, _ in ranked[:limit]]


class SuggestAggregator:
    """Fan a partial query out to suggestion sources and vote on completions."""

    def __init__(
        self,
        sources: Sequence[SuggestSource],
        *,
        max_concurrency: int = 4,
        limit: int = DEFAULT_SUGGEST_LIMIT,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self.sources = list(sources)
        self.max_concurrency = max_concurrency
        self.limit = limit

    async def suggest(self, query: str) -> list[str]:
        if not query or not query.strip():
            return []
        gate = asyncio.Semaphore(self.max_concurrency)

        async def _run(source: SuggestSource) -> list[str]:
            async with gate:
                try:
                    return await source.suggest(query)
                except Exception as e:
                    logger.warning("{} suggest raised: {}", source.name, e)
                    return []

        batches = await asyncio.gather(*(_run(s) for s in self.sources))
        return vote((s for batch in batches for s in batch), self.limit)
