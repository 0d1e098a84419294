"""
Config cache tests

Run: pytest tests/test_cache.py -v
"""

from imgconf.provider import CacheState, ConfigCache


class TestCacheState:
    """CacheState helpers"""

    def test_empty_state(self):
        state = CacheState()

        assert state.is_populated is False
        assert state.fetched_at == 0.0
        assert state.age(1234.0) is None

    def test_age(self):
        state = CacheState(config={"thumbnails": {}}, fetched_at=100.0)

        assert state.age(130.5) == 30.5


class TestConfigCache:
    """ConfigCache store/snapshot/clear"""

    def test_store_stamps_config_and_time_together(self, clock):
        cache = ConfigCache(clock=clock)
        config = {"thumbnails": {}}

        state = cache.store(config)

        assert cache.snapshot() is state
        assert state.config is config
        assert state.fetched_at == clock.now
        assert state.fetched_at_utc is not None

    def test_store_replaces_wholesale(self, clock):
        cache = ConfigCache(clock=clock)
        cache.store({"thumbnails": {"a": 1}, "original": {}})
        clock.advance(5)

        cache.store({"thumbnails": {"b": 2}})

        state = cache.snapshot()
        assert state.config == {"thumbnails": {"b": 2}}
        assert state.fetched_at == clock.now
