"""Shared search models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from bplus.search.errors import InvalidQueryError

Timeframe = Literal["day", "week", "month"]
OutcomeStatus = Literal["ok", "failed", "timeout"]

TIMEFRAMES: tuple[str, ...] = ("day", "week", "month")
DEFAULT_TIMEOUT_MS = 12000


@dataclass(slots=True)
class SearchResult:
    """Normalized search result item."""

    title: str
    url: str
    content: str = ""
    engine: str = ""

    def is_usable(self) -> bool:
        return bool(self.title and self.url)

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "url": self.url,
            "content": self.content,
            "engine": self.engine,
        }


@dataclass(frozen=True, slots=True)
class QueryOptions:
    """Per-call search options."""

    timeframe: Timeframe | None = None
    safesearch: bool = True
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if self.timeframe is not None and self.timeframe not in TIMEFRAMES:
            raise InvalidQueryError(
                f"timeframe must be one of {TIMEFRAMES}, got {self.timeframe!r}"
            )
        if self.timeout_ms <= 0:
            raise InvalidQueryError("timeout_ms must be >= 1")

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000


@dataclass(slots=True)
class ProviderOutcome:
    """Terminal state of one provider task."""

    engine: str
    status: OutcomeStatus
    results: list[SearchResult] = field(default_factory=list)
    elapsed_ms: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
