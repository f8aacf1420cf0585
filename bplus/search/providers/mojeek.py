"""Mojeek HTML results adapter."""

from bs4 import BeautifulSoup

from bplus.search.models import QueryOptions, SearchResult
from bplus.search.providers.base import SearchProvider


class MojeekProvider(SearchProvider):
    name = "mojeek"
    base_url = "https://www.mojeek.com/search"
    max_results = 15

    async def _search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        # Mojeek has no time-range filter; timeframe is ignored.
        html = await self._get_text(
            {"q": query, "safe": "1" if options.safesearch else "0"},
            options,
        )
        soup = BeautifulSoup(html, "html.parser")
        results: list[SearchResult] = []
        for item in soup.select("div.results div.result"):
            link = item.select_one("a[href]")
            if link is None:
                continue
            snippet = " ".join(p.get_text(strip=True) for p in item.find_all("p"))
            results.append(self._result(link.get_text(strip=True), link.get("href"), snippet))
        return results
