"""
In-process cache facility.

A thread-safe key/value store with per-entry TTL and a bounded size. The
facility is switched on at startup; what gets cached is decided by the
service layer.
"""

import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

import structlog

from ecommerce.config import Settings

logger = structlog.get_logger(__name__)


class CacheManager:
    """Bounded in-memory TTL cache."""

    def __init__(
        self,
        ttl_seconds: float = 300,
        max_entries: int = 1024,
        *,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._enabled = enabled
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "CacheManager":
        return cls(
            ttl_seconds=settings.CACHE_TTL_SECONDS,
            max_entries=settings.CACHE_MAX_ENTRIES,
            enabled=settings.CACHE_ENABLED,
        )

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        """Turn caching off and drop everything stored so far."""
        with self._lock:
            self._enabled = False
            count = len(self._entries)
            self._entries.clear()
        logger.info("cache_disabled", items_cleared=count)

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        """Return the cached value, or None when missing, expired or disabled."""
        with self._lock:
            if not self._enabled:
                return None

            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None

            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                self._misses += 1
                return None

            self._hits += 1
            return value

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:  # noqa: ANN401
        """Store a value. The oldest entry is evicted once the cache is full."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        with self._lock:
            if not self._enabled:
                return

            self._entries.pop(key, None)
            while len(self._entries) >= self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("cache_evicted", key=evicted)
            self._entries[key] = (self._clock() + ttl, value)

    def invalidate(self, key: str) -> bool:
        """Remove a single key. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Remove every entry and return how many were dropped."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        if count:
            logger.info("cache_cleared", items_cleared=count)
        return count

    def stats(self) -> dict[str, int | bool]:
        with self._lock:
            return {
                "enabled": self._enabled,
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }
