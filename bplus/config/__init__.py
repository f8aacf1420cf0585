"""Configuration module."""

from bplus.config.loader import get_config_path, load_config, save_config
from bplus.config.schema import Config, SearchConfig, SuggestConfig

__all__ = ["Config", "SearchConfig", "SuggestConfig", "get_config_path", "load_config", "save_config"]
