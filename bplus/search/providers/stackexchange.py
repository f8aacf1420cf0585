"""Stack Exchange advanced search adapter (Stack Overflow)."""

import time

from bplus.search.models import QueryOptions, SearchResult
from bplus.search.providers.base import SearchProvider

_TIMEFRAME_DAYS = {"day": 1, "week": 7, "month": 30}


def from_date(timeframe: str | None, now: float | None = None) -> int | None:
    """Epoch seconds for the start of `timeframe`, or None when unset."""
    days = _TIMEFRAME_DAYS.get(timeframe or "")
    if days is None:
        return None
    return int(now if now is not None else time.time()) - days * 86400


class StackExchangeProvider(SearchProvider):
    name = "stackexchange"
    base_url = "https://api.stackexchange.com/2.3/search/advanced"
    max_results = 10

    async def _search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        payload = await self._get_json(
            {
                "order": "desc",
                "sort": "relevance",
                "accepted": "True",
                "answers": "1",
                "q": query,
                "site": "stackoverflow",
                "filter": "default",
                "fromdate": from_date(options.timeframe),
            },
            options,
        )
        items = payload.get("items") or []
        return [
            self._result(
                item.get("title"),
                item.get("link"),
                f"Score {item.get('score', 0)} • {', '.join((item.get('tags') or [])[:3])}",
            )
            for item in items
        ]
