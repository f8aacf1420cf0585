import pytest


class FakeResponse:
    def __init__(self, payload=None, *, text: str = "", error: Exception | None = None):
        self._payload = payload
        self.text = text
        self._error = error

    def raise_for_status(self) -> None:
        if self._error:
            raise self._error

    def json(self):
        if self._payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


def make_stub_client(calls: list, response: FakeResponse):
    class StubClient:
        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, params=None, headers=None, timeout=None):
            calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
            return response

    return StubClient


@pytest.fixture
def stub_http(monkeypatch):
    """Patch httpx.AsyncClient in a module; returns the list of recorded calls."""

    def _install(target: str, response: FakeResponse) -> list:
        calls: list = []
        monkeypatch.setattr(target, make_stub_client(calls, response))
        return calls

    return _install
