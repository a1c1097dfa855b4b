"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from asset_paths.asset_errors import ConfigError
from asset_paths.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/cydolo/assets/main/"

DEFAULT_CONFIG: dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    # Empty means: use the built-in Assets catalog.
    "catalog": {},
    "log_level": "WARNING",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
            logger.info("Loaded config from %s", p)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    config["log_level"] = _normalize_log_level(config.get("log_level"))
    return config


def _normalize_log_level(level: object) -> str:
    name = str(level).upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(name), int):
        msg = f"Invalid log_level: {level!r}"
        raise ConfigError(msg)
    return name
