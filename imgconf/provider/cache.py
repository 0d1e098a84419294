"""
Configuration Cache

In-memory holder for the last successfully fetched image config.
"""

import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable


@dataclass(frozen=True)
class CacheState:
    """
    One cached config together with when it was fetched.

    Replaced wholesale on every store so the config and its
    timestamps can never disagree.
    """
    config: Any = None
    fetched_at: float = 0.0  # clock() seconds, 0.0 until first store
    fetched_at_utc: datetime | None = None

    @property
    def is_populated(self) -> bool:
        return self.config is not None

    def age(self, now: float) -> float | None:
        """Seconds since the config was fetched, None if never fetched"""
        if not self.is_populated:
            return None
        return now - self.fetched_at


class ConfigCache:
    """
    Thread-safe cache of the current image config.

    Stores:
    - Current config (None until first successful fetch)
    - Fetch time on the injected clock and in UTC
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._state = CacheState()
        self._lock = threading.Lock()

    def snapshot(self) -> CacheState:
        """Current state; never partially updated"""
        with self._lock:
            return self._state

    def store(self, config: Any) -> CacheState:
        """Replace the cached config and stamp it with the current time"""
        state = CacheState(
            config=config,
            fetched_at=self._clock(),
            fetched_at_utc=datetime.now(timezone.utc),
        )
        with self._lock:
            self._state = state
        return state

