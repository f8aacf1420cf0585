"""DuckDuckGo HTML results adapter."""

from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup

from bplus.search.models import QueryOptions, SearchResult
from bplus.search.providers.base import SearchProvider

_TIMEFRAMES = {"day": "d", "week": "w", "month": "m"}


def unwrap_redirect(href: str) -> str:
    """Resolve DuckDuckGo `/l/?uddg=` redirect links to their target."""
    parsed = urlparse(href)
    if parsed.path.startswith("/l/"):
        target = parse_qs(parsed.query).get("uddg")
        if target:
            return target[0]
    if href.startswith("//"):
        return f"https:{href}"
    return href


class DuckDuckGoProvider(SearchProvider):
    name = "duckduckgo"
    base_url = "https://duckduckgo.com/html/"
    max_results = 20

    async def _search(self, query: str, options: QueryOptions) -> list[SearchResult]:
        html = await self._get_text(
            {
                "q": query,
                "kp": "1" if options.safesearch else "-1",
                "df": _TIMEFRAMES.get(options.timeframe or ""),
            },
            options,
        )
        soup = BeautifulSoup(html, "html.parser")
        results: list[SearchResult] = []
        for link in soup.select("a.result__a"):
            container = link.find_parent(class_="result")
            snippet = container.select_one(".result__snippet") if container else None
            results.append(
                self._result(
                    link.get_text(strip=True),
                    unwrap_redirect(link.get("href", "")),
                    snippet.get_text(strip=True) if snippet else "",
                )
            )
        return results
