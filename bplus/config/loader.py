"""Read, migrate and write the bplus JSON config file."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from bplus.config.schema import Config


def get_config_path() -> Path:
    return Path.home() / ".bplus" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load the config file, falling back to defaults.

    A missing file, malformed JSON or values that fail validation all yield
    `Config()`; the problem is logged, never raised.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return Config()

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        return Config.model_validate(_migrate_config(raw))
    except ValueError as e:
        logger.warning("Ignoring invalid config at {} ({}); using defaults", path, e)
        return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Write `config` with camelCase keys, creating parent directories."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.model_dump(by_alias=True), f, indent=2)


def _migrate_config(data: Any) -> Any:
    """Migrate old config formats to current; non-dict shapes pass through for validation."""
    if not isinstance(data, dict):
        return data
    search_cfg = data.setdefault("search", {})
    if not isinstance(search_cfg, dict):
        return data

    # Move legacy top-level timeout (seconds) -> search.timeoutMs
    legacy_timeout = data.pop("timeout", None)
    if legacy_timeout is not None and "timeoutMs" not in search_cfg:
        try:
            search_cfg["timeoutMs"] = int(float(legacy_timeout) * 1000)
        except (TypeError, ValueError):
            logger.warning("Dropping unreadable legacy timeout: {!r}", legacy_timeout)

    # Rename legacy search.engines -> search.providers
    legacy_engines = search_cfg.pop("engines", None)
    if legacy_engines is not None and "providers" not in search_cfg:
        search_cfg["providers"] = legacy_engines

    # Normalize legacy safesearch values (1/0, "on"/"off")
    safesearch = search_cfg.get("safesearch")
    if isinstance(safesearch, str):
        search_cfg["safesearch"] = safesearch.strip().lower() not in ("off", "0", "-1", "false", "")
    elif isinstance(safesearch, int) and not isinstance(safesearch, bool):
        search_cfg["safesearch"] = safesearch > 0

    return data
