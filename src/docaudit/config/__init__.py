"""House-style configuration package."""

from docaudit.config.loader import get_config, load_config
from docaudit.config.models import HouseStyleConfig, LinkCheckSettings, ValidatorSettings

__all__ = [
    "HouseStyleConfig",
    "LinkCheckSettings",
    "ValidatorSettings",
    "get_config",
    "load_config",
]
