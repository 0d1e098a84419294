"""
Provider Settings

Settings dataclass for the image config provider, optionally loaded
from a local YAML file.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .exceptions import SettingsError
from .logging_setup import get_service_logger

logger = get_service_logger("settings")

# Remote image preset config
CONFIG_URL = "https://s3.kiddihub.com/conf/img.conf.json"
# 5 minutes cache
CACHE_DURATION_SECONDS = 5 * 60
# 5 second request timeout
REQUEST_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class ProviderSettings:
    """Where to fetch the image config from and how long to trust it"""
    config_url: str = CONFIG_URL
    cache_duration_seconds: float = CACHE_DURATION_SECONDS
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS

    def __post_init__(self):
        if not self.config_url:
            raise SettingsError("config_url must not be empty", "config_url")
        if self.cache_duration_seconds < 0:
            raise SettingsError(
                f"cache_duration_seconds must be >= 0, got {self.cache_duration_seconds}",
                "cache_duration_seconds",
            )
        if self.timeout_seconds <= 0:
            raise SettingsError(
                f"timeout_seconds must be > 0, got {self.timeout_seconds}",
                "timeout_seconds",
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProviderSettings":
        """Build settings from a dict, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def load_settings(path: str | Path | None = None) -> ProviderSettings:
    """
    Load provider settings from a YAML file.

    The file may hold the settings at top level or under an
    ``image_config`` section. A missing or unparseable file yields
    the default settings.

    Args:
        path: Path to YAML file, or None for defaults

    Returns:
        ProviderSettings instance
    """
    if path is None:
        return ProviderSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Settings file not found: {path}")
        return ProviderSettings()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing settings: {e}")
        return ProviderSettings()

    if not isinstance(data, dict):
        logger.error(f"Settings file must contain a mapping: {path}")
        return ProviderSettings()

    section = data.get("image_config", data)
    if not isinstance(section, dict):
        logger.error(f"image_config section must be a mapping: {path}")
        return ProviderSettings()

    return ProviderSettings.from_dict(section)
