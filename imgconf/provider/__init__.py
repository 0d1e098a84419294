"""
Image Config Provider

Responsibilities:
- Fetch image preset config from the remote endpoint
- Cache it in memory for a bounded interval
- Fall back to the last good config, then to built-in defaults
"""

from .cache import CacheState, ConfigCache
from .defaults import DEFAULT_IMAGE_CONFIG
from .fetcher import ConfigFetcher
from .service import ImageConfigProvider

__all__ = [
    "CacheState",
    "ConfigCache",
    "ConfigFetcher",
    "DEFAULT_IMAGE_CONFIG",
    "ImageConfigProvider",
]
