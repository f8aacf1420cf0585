"""Qwant HTML results adapter."""

from bs4 import BeautifulSoup

from bplus.search.models import QueryOptions, SearchResult
from bplus.search.providers.base import SearchProvider


class QwantProvider(SearchProvider):
    name = "qwant"
    base_url = "https://www.qwant.com/"
    max_results = 15

    async def _search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        html = await self._get_text(
            {
                "q": query,
                "t": "web",
                "s": "1" if options.safesearch else "0",
                "freshness": options.timeframe,
            },
            options,
        )
        soup = BeautifulSoup(html, "html.parser")
        results: list[SearchResult] = []
        for link in soup.select('a[data-testid="result-link"]'):
            card = link.find_parent(attrs={"data-testid": "result-card"})
            description = (
                card.select_one('[data-testid="result-description"]') if card else None
            )
            results.append(
                self._result(
                    link.get_text(strip=True),
                    link.get("href"),
                    description.get_text(strip=True) if description else "",
                )
            )
        return results
