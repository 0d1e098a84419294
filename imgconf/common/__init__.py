"""
Common Utilities

Shared modules used across the provider:
- config.py - Provider settings dataclass and YAML loader
- exceptions.py - Custom exception classes
- logging_setup.py - Structured logging setup
"""

from .config import (
    CACHE_DURATION_SECONDS,
    CONFIG_URL,
    REQUEST_TIMEOUT_SECONDS,
    ProviderSettings,
    load_settings,
)
from .exceptions import (
    FetchError,
    ImageConfigError,
    ParseError,
    SettingsError,
)
from .logging_setup import (
    JsonFormatter,
    ServiceLoggerAdapter,
    get_service_logger,
    setup_logging,
)

__all__ = [
    # Config
    "CACHE_DURATION_SECONDS",
    "CONFIG_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "ProviderSettings",
    "load_settings",
    # Exceptions
    "ImageConfigError",
    "FetchError",
    "ParseError",
    "SettingsError",
    # Logging
    "JsonFormatter",
    "ServiceLoggerAdapter",
    "get_service_logger",
    "setup_logging",
]
