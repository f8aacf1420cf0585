"""Search provider adapters."""

from bplus.search.providers.base import DEFAULT_USER_AGENT, SearchProvider
from bplus.search.providers.duckduckgo import DuckDuckGoProvider
from bplus.search.providers.mojeek import MojeekProvider
from bplus.search.providers.qwant import QwantProvider
from bplus.search.providers.reddit import RedditProvider
from bplus.search.providers.stackexchange import StackExchangeProvider
from bplus.search.providers.wikipedia import WikipediaProvider

# Registration order drives dedup precedence.
PROVIDERS: dict[str, type[SearchProvider]] = {
    "duckduckgo": DuckDuckGoProvider,
    "mojeek": MojeekProvider,
    "qwant": QwantProvider,
    "wikipedia": WikipediaProvider,
    "reddit": RedditProvider,
    "stackexchange": StackExchangeProvider,
}

__all__ = [
    "DEFAULT_USER_AGENT",
    "PROVIDERS",
    "SearchProvider",
    "DuckDuckGoProvider",
    "MojeekProvider",
    "QwantProvider",
    "RedditProvider",
    "StackExchangeProvider",
    "WikipediaProvider",
]
