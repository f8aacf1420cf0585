import httpx
import pytest

from bplus.search.models import QueryOptions
from bplus.search.providers import (
    DuckDuckGoProvider,
    MojeekProvider,
    QwantProvider,
    RedditProvider,
    StackExchangeProvider,
    WikipediaProvider,
)
from bplus.search.providers.duckduckgo import unwrap_redirect
from bplus.search.providers.stackexchange import from_date
from bplus.search.providers.wikipedia import article_url, clean_snippet
from tests.conftest import FakeResponse

TARGET = "bplus.search.providers.base.httpx.AsyncClient"

DDG_HTML = """
<div class="results">
  <div class="result results_links web-result">
    <h2 class="result__title">
      <a class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fone&amp;rut=abc">First Result</a>
    </h2>
    <a class="result__snippet" href="#">First snippet</a>
  </div>
  <div class="result results_links web-result">
    <h2 class="result__title"><a class="result__a" href="https://example.com/two">Second Result</a></h2>
  </div>
  <div class="result"><h2><a class="result__a" href="">   </a></h2></div>
</div>
"""

MOJEEK_HTML = """
<div class="results">
  <ul>
    <li><div class="result">
      <a href="https://example.org/a">Mojeek A</a>
      <p>Snippet A</p>
    </div></li>
    <li><div class="result"><p>no link here</p></div></li>
  </ul>
</div>
"""

QWANT_HTML = """
<div data-testid="result-card">
  <a data-testid="result-link" href="https://example.net/q">Qwant Q</a>
  <div data-testid="result-description">Qwant snippet</div>
</div>
"""


@pytest.mark.asyncio
async def test_duckduckgo_parses_html_and_maps_options(stub_http) -> None:
    calls = stub_http(TARGET, FakeResponse(text=DDG_HTML))

    results = await DuckDuckGoProvider().search(
        "python", QueryOptions(timeframe="week", safesearch=False, timeout_ms=3000)
    )

    assert [r.title for r in results] == ["First Result", "Second Result"]
    assert results[0].url == "https://example.com/one"
    assert results[0].content == "First snippet"
    assert results[1].content == ""
    assert all(r.engine == "duckduckgo" for r in results)
    assert calls[0]["url"] == "https://duckduckgo.com/html/"
    assert calls[0]["params"] == {"q": "python", "kp": "-1", "df": "w"}
    assert calls[0]["headers"]["User-Agent"] == "bplus-native/1.0"
    assert calls[0]["timeout"] == 3.0


@pytest.mark.asyncio
async def test_duckduckgo_omits_timeframe_when_unset(stub_http) -> None:
    calls = stub_http(TARGET, FakeResponse(text=""))

    results = await DuckDuckGoProvider().search("python", QueryOptions())

    assert results == []
    assert calls[0]["params"] == {"q": "python", "kp": "1"}


def test_unwrap_redirect() -> None:
    assert unwrap_redirect("//duckduckgo.com/l/?uddg=https%3A%2F%2Fa.com%2Fx") == "https://a.com/x"
    assert unwrap_redirect("//example.com/page") == "https://example.com/page"
    assert unwrap_redirect("https://example.com/page") == "https://example.com/page"


@pytest.mark.asyncio
async def test_mojeek_skips_results_without_link(stub_http) -> None:
    calls = stub_http(TARGET, FakeResponse(text=MOJEEK_HTML))

    results = await MojeekProvider().search("q", QueryOptions(timeframe="day"))

    assert len(results) == 1
    assert results[0].title == "Mojeek A"
    assert results[0].url == "https://example.org/a"
    assert results[0].content == "Snippet A"
    assert results[0].engine == "mojeek"
    assert "df" not in calls[0]["params"]
    assert calls[0]["params"]["safe"] == "1"


@pytest.mark.asyncio
async def test_qwant_reads_card_description(stub_http) -> None:
    calls = stub_http(TARGET, FakeResponse(text=QWANT_HTML))

    results = await QwantProvider().search("q", QueryOptions(timeframe="month"))

    assert results[0].title == "Qwant Q"
    assert results[0].content == "Qwant snippet"
    assert calls[0]["params"]["freshness"] == "month"
    assert calls[0]["params"]["t"] == "web"


@pytest.mark.asyncio
async def test_wikipedia_builds_article_urls(stub_http) -> None:
    payload = {
        "query": {
            "search": [
                {
                    "title": "Python (programming language)",
                    "snippet": '<span class="searchmatch">Python</span> is &quot;fun&quot;',
                },
                {"snippet": "untitled"},
            ]
        }
    }
    calls = stub_http(TARGET, FakeResponse(payload))

    results = await WikipediaProvider().search("python", QueryOptions(timeframe="day"))

    assert len(results) == 1
    assert results[0].url == "https://en.wikipedia.org/wiki/Python_(programming_language)"
    assert results[0].content == 'Python is "fun"'
    assert calls[0]["params"]["srsearch"] == "python"
    assert calls[0]["params"]["srlimit"] == 10


def test_wikipedia_helpers() -> None:
    assert article_url("C++ / C#") == "https://en.wikipedia.org/wiki/C%2B%2B_%2F_C%23"
    assert clean_snippet("") == ""


@pytest.mark.asyncio
async def test_reddit_maps_posts(stub_http) -> None:
    payload = {
        "data": {
            "children": [
                {"data": {"title": "Post", "permalink": "/r/python/comments/1/post/", "selftext": "x" * 300}},
                {"data": {"title": "Link", "permalink": "/r/news/2/", "selftext": "", "subreddit_name_prefixed": "r/news"}},
                {"data": {"title": "Broken"}},
            ]
        }
    }
    calls = stub_http(TARGET, FakeResponse(payload))

    results = await RedditProvider().search("py", QueryOptions(timeframe="week"))

    assert [r.url for r in results] == [
        "https://www.reddit.com/r/python/comments/1/post/",
        "https://www.reddit.com/r/news/2/",
    ]
    assert len(results[0].content) == 240
    assert results[1].content == "r/news"
    assert calls[0]["params"]["t"] == "week"
    assert "include_over_18" not in calls[0]["params"]


@pytest.mark.asyncio
async def test_reddit_safesearch_off_includes_nsfw(stub_http) -> None:
    calls = stub_http(TARGET, FakeResponse({"data": {"children": []}}))

    await RedditProvider().search("py", QueryOptions(safesearch=False))

    assert calls[0]["params"]["include_over_18"] == "on"
    assert calls[0]["params"]["t"] == "all"


@pytest.mark.asyncio
async def test_stackexchange_formats_score_and_tags(stub_http) -> None:
    items = [
        {"title": f"Q{i}", "link": f"https://stackoverflow.com/q/{i}", "score": i, "tags": ["a", "b", "c", "d"]}
        for i in range(15)
    ]
    calls = stub_http(TARGET, FakeResponse({"items": items}))

    results = await StackExchangeProvider().search("q", QueryOptions())

    assert len(results) == 10
    assert results[3].content == "Score 3 • a, b, c"
    assert "fromdate" not in calls[0]["params"]
    assert calls[0]["params"]["site"] == "stackoverflow"


def test_stackexchange_from_date() -> None:
    assert from_date(None) is None
    assert from_date("week", now=1_000_000) == 1_000_000 - 7 * 86400


@pytest.mark.asyncio
async def test_provider_http_error_degrades_to_empty(stub_http) -> None:
    stub_http(TARGET, FakeResponse({}, error=httpx.HTTPError("boom")))

    assert await RedditProvider().search("fail", QueryOptions()) == []


@pytest.mark.asyncio
async def test_provider_unparsable_body_degrades_to_empty(stub_http) -> None:
    stub_http(TARGET, FakeResponse(None, text="<html>rate limited</html>"))

    assert await StackExchangeProvider().search("fail", QueryOptions()) == []


@pytest.mark.asyncio
async def test_provider_unexpected_shape_degrades_to_empty(stub_http) -> None:
    stub_http(TARGET, FakeResponse(["not", "a", "dict"]))

    assert await WikipediaProvider().search("fail", QueryOptions()) == []


@pytest.mark.asyncio
async def test_provider_caps_result_count(stub_http) -> None:
    cards = "".join(
        f'<div data-testid="result-card"><a data-testid="result-link" href="https://e.com/{i}">T{i}</a></div>'
        for i in range(40)
    )
    stub_http(TARGET, FakeResponse(text=cards))

    results = await QwantProvider().search("q", QueryOptions())

    assert len(results) == 15


@pytest.mark.asyncio
async def test_provider_custom_base_url_and_user_agent(stub_http) -> None:
    calls = stub_http(TARGET, FakeResponse({"items": []}))

    provider = StackExchangeProvider(user_agent="test-agent/2.0", base_url="https://se.example/search")
    await provider.search("q", QueryOptions())

    assert calls[0]["url"] == "https://se.example/search"
    assert calls[0]["headers"] == {"User-Agent": "test-agent/2.0"}
