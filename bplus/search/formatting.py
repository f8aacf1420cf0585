"""Plain-text renderings of a result list."""

from collections.abc import Sequence

from bplus.search.models import SearchResult


def format_results(query: str, results: Sequence[SearchResult]) -> str:
    """Numbered listing: title, url, then snippet when present."""
    if not results:
        return f"No results for: {query}"

    lines = [f"Results for: {query}\n"]
    for i, item in enumerate(results, 1):
        lines.append(f"{i}. {item.title}\n   {item.url}")
        if item.content:
            lines.append(f"   {item.content}")
    return "\n".join(lines)


def format_results_context(results: Sequence[SearchResult]) -> str:
    """Title/URL/Snippet blocks used as grounding context for summarization."""
    return "\n\n---\n\n".join(
        f"Title: {r.title}\nURL: {r.url}\nSnippet: {r.content}" for r in results
    )
