"""Reddit search JSON adapter."""

from bplus.search.models import QueryOptions, SearchResult
from bplus.search.providers.base import SearchProvider


class RedditProvider(SearchProvider):
    name = "reddit"
    base_url = "https://www.reddit.com/search.json"
    max_results = 10

    async def _search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        payload = await self._get_json(
            {
                "q": query,
                "sort": "relevance",
                "t": options.timeframe or "all",
                "limit": self.max_results,
                "include_over_18": None if options.safesearch else "on",
            },
            options,
        )
        posts = (payload.get("data") or {}).get("children") or []
        results: list[SearchResult] = []
        for post in posts:
            data = post.get("data") or {}
            permalink = data.get("permalink")
            if not permalink:
                continue
            content = (data.get("selftext") or "")[:240] or data.get("subreddit_name_prefixed", "")
            results.append(self._result(data.get("title"), f"https://www.reddit.com{permalink}", content))
        return results
