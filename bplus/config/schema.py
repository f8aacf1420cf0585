"""Configuration schema."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bplus.search.models import DEFAULT_TIMEOUT_MS
from bplus.search.providers import DEFAULT_USER_AGENT, PROVIDERS
from bplus.search.suggest import DEFAULT_SUGGEST_LIMIT, DEFAULT_SUGGEST_TIMEOUT_MS, SUGGEST_SOURCES


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchConfig(Base):
    """Aggregated web search settings."""

    providers: list[str] = Field(default_factory=lambda: list(PROVIDERS))
    max_concurrency: int = Field(default=4, ge=1)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=1)
    safesearch: bool = True
    user_agent: str = DEFAULT_USER_AGENT


class SuggestConfig(Base):
    """Autosuggest settings."""

    sources: list[str] = Field(default_factory=lambda: list(SUGGEST_SOURCES))
    limit: int = Field(default=DEFAULT_SUGGEST_LIMIT, ge=1)
    timeout_ms: int = Field(default=DEFAULT_SUGGEST_TIMEOUT_MS, ge=1)


class Config(Base):
    """Root configuration."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    suggest: SuggestConfig = Field(default_factory=SuggestConfig)
