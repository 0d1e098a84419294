"""
imgconf - image resize presets for client applications

Usage:
    provider = get_provider()
    provider.start()                       # once, inside the running loop

    sizes = provider.thumbnails            # cached or default, never blocks
    config = await provider.get_config_async()
"""

import threading

from .common import (
    FetchError,
    ImageConfigError,
    ParseError,
    ProviderSettings,
    SettingsError,
    load_settings,
)
from .provider import DEFAULT_IMAGE_CONFIG, ImageConfigProvider

__version__ = "1.0.0"

_provider: ImageConfigProvider | None = None
_provider_lock = threading.Lock()


def get_provider(settings: ProviderSettings | None = None) -> ImageConfigProvider:
    """
    Get the process-wide provider, creating it on first call.

    Settings are only used when the provider is created.
    """
    global _provider
    with _provider_lock:
        if _provider is None:
            _provider = ImageConfigProvider(settings=settings)
        return _provider


def reset_provider() -> ImageConfigProvider | None:
    """
    Forget the process-wide provider.

    Returns the dropped provider so the caller can close() it.
    """
    global _provider
    with _provider_lock:
        provider, _provider = _provider, None
        return provider


__all__ = [
    "DEFAULT_IMAGE_CONFIG",
    "FetchError",
    "ImageConfigError",
    "ImageConfigProvider",
    "ParseError",
    "ProviderSettings",
    "SettingsError",
    "get_provider",
    "load_settings",
    "reset_provider",
]
