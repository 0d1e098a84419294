"""
Image Config Provider

Serves the image preset config with:
- In-memory caching (5 minutes by default)
- Lazy refresh from the remote endpoint when stale
- Fallback to the last good config, then to the built-in defaults

Nothing raised while fetching reaches callers; failures are logged
and the best available config is returned instead. Callers always get
their own copy, so the cache and the defaults cannot be edited in place.
"""

import asyncio
import copy
import threading
import time
from typing import Any, Callable

import httpx

from ..common.config import ProviderSettings
from ..common.exceptions import FetchError, ParseError
from ..common.logging_setup import get_service_logger
from .cache import CacheState, ConfigCache
from .defaults import DEFAULT_IMAGE_CONFIG
from .fetcher import ConfigFetcher

logger = get_service_logger("provider")


class ImageConfigProvider:
    """
    Image Config Provider

    Two access paths:
    - get_config_async(): fresh-or-fallback, may hit the network
    - get(key) / thumbnails / original: cached-or-default, never blocks

    Concurrent stale reads are not deduplicated; each may fetch and
    the last successful response wins.
    """

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings or ProviderSettings()
        self.fetcher = ConfigFetcher(
            config_url=self.settings.config_url,
            timeout_seconds=self.settings.timeout_seconds,
            transport=transport,
        )
        self.cache = ConfigCache(clock=clock)
        self._clock = clock

        self._startup_task: asyncio.Task | None = None
        self._refresh_count = 0
        self._failure_count = 0
        self._counter_lock = threading.Lock()

    async def __aenter__(self) -> "ImageConfigProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def start(self) -> asyncio.Task:
        """
        Kick off the initial fetch in the background.

        Must be called from within a running event loop. The returned
        task never needs to be awaited; its failure is only logged.
        """
        if self._startup_task is not None and not self._startup_task.done():
            return self._startup_task

        loop = asyncio.get_running_loop()
        self._startup_task = loop.create_task(self.refresh())
        self._startup_task.add_done_callback(self._on_startup_done)
        logger.debug(f"Initial image config fetch scheduled: {self.settings.config_url}")
        return self._startup_task

    def _on_startup_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            logger.debug("Initial image config fetch cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Initial image config fetch failed: {exc}")

    async def close(self) -> None:
        """Cancel a pending startup fetch and close the HTTP client"""
        if self._startup_task and not self._startup_task.done():
            self._startup_task.cancel()
            try:
                await self._startup_task
            except asyncio.CancelledError:
                pass

        await self.fetcher.close()

    async def refresh(self) -> Any:
        """
        Fetch the remote config and cache it.

        Returns:
            The new config on success, otherwise the cached config if
            any, otherwise the built-in defaults. Cache is only
            updated on success.
        """
        self._count(refreshes=1)

        try:
            config = await self.fetcher.fetch()
        except FetchError as e:
            self._count(failures=1)
            logger.warning(
                f"Failed to fetch image config: {e.message}",
                extra={"config_url": e.url, "status_code": e.status_code},
            )
            return self._fallback()
        except ParseError as e:
            self._count(failures=1)
            logger.error(
                f"Failed to parse image config: {e.message}",
                extra={"config_url": e.url},
            )
            return self._fallback()
        except Exception as e:
            self._count(failures=1)
            logger.error(f"Unexpected error fetching image config: {e}", exc_info=True)
            return self._fallback()

        self.cache.store(config)

        categories = sorted(config.get("thumbnails") or {}) if isinstance(config, dict) else []
        logger.info(
            "Image config refreshed",
            extra={"config_url": self.settings.config_url, "categories": categories},
        )
        return copy.deepcopy(config)

    def _count(self, refreshes: int = 0, failures: int = 0) -> None:
        with self._counter_lock:
            self._refresh_count += refreshes
            self._failure_count += failures

    def _fallback(self) -> Any:
        state = self.cache.snapshot()
        if state.is_populated:
            return copy.deepcopy(state.config)
        return copy.deepcopy(DEFAULT_IMAGE_CONFIG)

    def _is_fresh(self, state: CacheState) -> bool:
        age = state.age(self._clock())
        return age is not None and age < self.settings.cache_duration_seconds

    async def get_config_async(self) -> Any:
        """
        Get the current config, refreshing it first if stale.

        Returns:
            Cached config if younger than the cache duration, else
            the result of refresh()
        """
        state = self.cache.snapshot()
        if self._is_fresh(state):
            return copy.deepcopy(state.config)

        return await self.refresh()

    async def get_async(self) -> Any:
        """Same as get_config_async(), for callers holding the sync accessors"""
        return await self.get_config_async()

    def get(self, key: str) -> Any:
        """
        Get a top-level config field without touching the network.

        Staleness is ignored here. Unknown keys return None.
        """
        state = self.cache.snapshot()
        config = state.config if state.is_populated else DEFAULT_IMAGE_CONFIG

        if not isinstance(config, dict):
            return None
        return copy.deepcopy(config.get(key))

    @property
    def thumbnails(self) -> Any:
        """Thumbnail sizes per category and breakpoint"""
        return self.get("thumbnails")

    @property
    def original(self) -> Any:
        """Maximum original image bounds per category"""
        return self.get("original")

    def status(self) -> dict[str, Any]:
        """Health-style summary of the cache"""
        state = self.cache.snapshot()
        age = state.age(self._clock())
        with self._counter_lock:
            refresh_count, failure_count = self._refresh_count, self._failure_count

        return {
            "config_url": self.settings.config_url,
            "cache_duration_seconds": self.settings.cache_duration_seconds,
            "has_cached_config": state.is_populated,
            "is_stale": not self._is_fresh(state),
            "age_seconds": round(age, 3) if age is not None else None,
            "last_fetch_at": state.fetched_at_utc.isoformat() if state.fetched_at_utc else None,
            "refresh_count": refresh_count,
            "failure_count": failure_count,
        }
