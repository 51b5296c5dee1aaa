"""House-style configuration loading.

Reads a JSON file, validates it into a ``HouseStyleConfig`` and caches the
result per resolved path, so each file is parsed at most once per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from docaudit.config.models import HouseStyleConfig
from docaudit.domain.errors import ConfigurationError

# Resolved path -> validated config
_config_cache: dict[str, HouseStyleConfig] = {}

# Default config ships next to this module
DEFAULT_CONFIG_PATH = Path(__file__).parent / "house_style.json"


def load_config(path: Optional[Path] = None) -> HouseStyleConfig:
    """Load and validate the house-style config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file.
        If ``None``, the built-in ``house_style.json`` is used.

    Returns
    -------
    HouseStyleConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, is not JSON, or does not match the schema.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = HouseStyleConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> HouseStyleConfig:
    """Get the default configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache."""
    _config_cache.clear()
