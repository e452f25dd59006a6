"""Tests for the in-process cache facility."""

import threading

import pytest

from ecommerce.cache import CacheManager
from ecommerce.config import Settings


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestCacheManager:
    """Test suite for CacheManager."""

    def test_set_and_get(self) -> None:
        cache = CacheManager()
        cache.set("user:1", {"name": "alice"})
        assert cache.get("user:1") == {"name": "alice"}

    def test_missing_key(self) -> None:
        assert CacheManager().get("nope") is None

    def test_entry_expires(self) -> None:
        clock = FakeClock()
        cache = CacheManager(ttl_seconds=10, clock=clock)
        cache.set("k", "v")
        clock.now = 9.9
        assert cache.get("k") == "v"
        clock.now = 10.0
        assert cache.get("k") is None
        assert cache.stats()["entries"] == 0

    def test_per_entry_ttl(self) -> None:
        clock = FakeClock()
        cache = CacheManager(ttl_seconds=10, clock=clock)
        cache.set("short", 1, ttl_seconds=1)
        clock.now = 2
        assert cache.get("short") is None

    def test_oldest_entry_evicted(self) -> None:
        cache = CacheManager(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)
        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.get("c") == 3

    def test_overwrite_does_not_evict(self) -> None:
        cache = CacheManager(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)
        assert cache.get("a") == 10
        assert cache.get("b") == 2

    def test_disabled_cache_is_noop(self) -> None:
        cache = CacheManager(enabled=False)
        cache.set("k", "v")
        assert cache.get("k") is None
        assert cache.stats()["entries"] == 0

    def test_disable_clears_entries(self) -> None:
        cache = CacheManager()
        cache.set("k", "v")
        cache.disable()
        cache.enable()
        assert cache.get("k") is None

    def test_invalidate(self) -> None:
        cache = CacheManager()
        cache.set("k", "v")
        assert cache.invalidate("k") is True
        assert cache.invalidate("k") is False
        assert cache.get("k") is None

    def test_clear_returns_count(self) -> None:
        cache = CacheManager()
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.clear() == 2
        assert cache.clear() == 0

    def test_stats_track_hits_and_misses(self) -> None:
        cache = CacheManager()
        cache.set("k", "v")
        cache.get("k")
        cache.get("missing")
        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["enabled"] is True

    @pytest.mark.parametrize(("ttl", "size"), [(0, 10), (10, 0), (-1, 10)])
    def test_rejects_non_positive_limits(self, ttl: float, size: int) -> None:
        with pytest.raises(ValueError):
            CacheManager(ttl_seconds=ttl, max_entries=size)

    def test_from_settings(self) -> None:
        settings = Settings(CACHE_ENABLED=False, CACHE_TTL_SECONDS=60, CACHE_MAX_ENTRIES=5)
        cache = CacheManager.from_settings(settings)
        assert cache.enabled is False
        assert cache.ttl_seconds == 60
        assert cache.max_entries == 5

    def test_disable_waits_for_lock(self) -> None:
        cache = CacheManager()
        with cache._lock:
            worker = threading.Thread(target=cache.disable)
            worker.start()
            worker.join(timeout=0.1)
            assert worker.is_alive()
            assert cache.enabled is True
        worker.join(timeout=1)
        assert cache.enabled is False

    def test_set_rechecks_flag_after_acquiring_lock(self) -> None:
        cache = CacheManager()
        with cache._lock:
            worker = threading.Thread(target=cache.set, args=("k", "v"))
            worker.start()
            worker.join(timeout=0.1)
            # disable() completing while set() is queued on the lock
            cache._enabled = False
        worker.join(timeout=1)
        assert not worker.is_alive()
        assert cache._entries == {}
