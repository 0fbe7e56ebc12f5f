"""Configuration loading for GlowHabit.

Settings live in ``~/.config/glowhabit/config.toml``; the
``GLOWHABIT_CONFIG`` environment variable points elsewhere. Values from the
file are merged over ``DEFAULT_CONFIG``.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "glowhabit"

DEFAULT_CONFIG = {
    "storage": {
        "db_path": str(CONFIG_DIR / "glowhabit.db"),
    },
    "journal": {
        "sentiment_analysis_enabled": True,
    },
    "analytics": {
        "window_days": 30,
        "trend_days": 7,
    },
}


def get_config_path() -> Path:
    """Path of the config file, honoring ``GLOWHABIT_CONFIG``."""
    override = os.environ.get("GLOWHABIT_CONFIG")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "config.toml"


def _merge(base: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        path: Config file to read. Defaults to ``get_config_path()``.

    Returns:
        Config dict. A missing or unreadable file yields the defaults.
    """
    config_path = Path(path) if path else get_config_path()

    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        return _merge(DEFAULT_CONFIG, toml.load(config_path))
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)


def get_db_path(config: dict) -> Path:
    return Path(config["storage"]["db_path"]).expanduser()
