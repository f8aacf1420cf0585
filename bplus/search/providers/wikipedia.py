"""Wikipedia full-text search API adapter."""

import re
from urllib.parse import quote

from bplus.search.models import QueryOptions, SearchResult
from bplus.search.providers.base import SearchProvider

_SPAN_RE = re.compile(r"</?span[^>]*>")


def article_url(title: str) -> str:
    return "https://en.wikipedia.org/wiki/" + quote(re.sub(r"\s", "_", title), safe="!*'()")


def clean_snippet(snippet: str) -> str:
    """Strip search-match highlighting from an API snippet."""
    return _SPAN_RE.sub("", snippet or "").replace("&quot;", '"')


class WikipediaProvider(SearchProvider):
    name = "wikipedia"
    base_url = "https://en.wikipedia.org/w/api.php"
    max_results = 10

    async def _search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        # The search API has no time-range filter.
        payload = await self._get_json(
            {
                "action": "query",
                "list": "search",
                "utf8": "1",
                "format": "json",
                "srsearch": query,
                "srlimit": self.max_results,
            },
            options,
        )
        items = (payload.get("query") or {}).get("search") or []
        return [
            self._result(
                item["title"],
                article_url(item["title"]),
                clean_snippet(item.get("snippet", "")),
            )
            for item in items
            if item.get("title")
        ]
