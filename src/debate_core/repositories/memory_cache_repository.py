"""In-process implementation of CacheStore.

A dictionary of ``CacheEntryEntity`` guarded by a lock. Entries expire
lazily on read and are also removed by a sweep that runs at most once per
``check_period`` seconds, piggybacking on regular store calls.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from debate_core.config import settings
from debate_core.entities import CacheEntryEntity

logger = logging.getLogger(__name__)


class MemoryCacheRepository:
    """Local, non-distributed TTL key-value store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Values are stored by reference, not copied. Under concurrent writes to
    the same key the last writer wins.

    Example:
        ```python
        store = MemoryCacheRepository.create()
        store.set("response:hello", "Hi there", ttl=60)
        store.get("response:hello")  # 'Hi there'
        ```
    """

    def __init__(
        self,
        default_ttl: int | None = None,
        check_period: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-process store.

        Args:
            default_ttl: TTL used when ``set`` gets none. Defaults to settings.
            check_period: Seconds between expiry sweeps (0 disables). Defaults to settings.
            clock: Monotonic time source, injectable for tests.
        """
        self._default_ttl = settings.cache_default_ttl if default_ttl is None else default_ttl
        self._check_period = (
            settings.cache_check_period if check_period is None else check_period
        )
        self._clock = clock
        self._entries: dict[str, CacheEntryEntity] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()
        self._stats = {"hits": 0, "misses": 0, "sets": 0, "deletes": 0, "expired": 0}

    @classmethod
    def create(
        cls,
        default_ttl: int | None = None,
        check_period: int | None = None,
    ) -> "MemoryCacheRepository":
        """Factory method to create MemoryCacheRepository with defaults.

        Args:
            default_ttl: Default TTL in seconds. If None, uses settings.
            check_period: Sweep period in seconds. If None, uses settings.

        Returns:
            Configured MemoryCacheRepository
        """
        store = cls(default_ttl=default_ttl, check_period=check_period)
        logger.info(
            "In-process cache initialized (default_ttl=%ss, check_period=%ss)",
            store._default_ttl,
            store._check_period,
        )
        return store

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value under ``key`` for ``ttl`` seconds.

        Returns:
            True once stored, False for a non-positive ttl
        """
        ttl = self._default_ttl if ttl is None else ttl
        if ttl <= 0:
            return False

        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)
            self._entries[key] = CacheEntryEntity(value=value, expires_at=now + ttl)
            self._stats["sets"] += 1

        logger.debug("Cache item set key=%s ttl=%s", key, ttl)
        return True

    def get(self, key: str) -> Any | None:
        """Return the live value for ``key`` or None."""
        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)
            entry = self._entries.get(key)
            if entry is not None and entry.is_expired(now):
                del self._entries[key]
                self._stats["expired"] += 1
                entry = None
            self._stats["hits" if entry is not None else "misses"] += 1

        logger.debug("Cache access key=%s hit=%s", key, entry is not None)
        return entry.value if entry is not None else None

    def delete(self, key: str) -> bool:
        """Delete ``key``; True if a live entry was removed."""
        with self._lock:
            entry = self._entries.pop(key, None)
            deleted = entry is not None and not entry.is_expired(self._clock())
            if deleted:
                self._stats["deletes"] += 1

        logger.debug("Cache item deleted key=%s success=%s", key, deleted)
        return deleted

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()
        logger.info("Cache cleared")

    def sweep(self) -> int:
        """Remove all expired entries now.

        Returns:
            Number of entries removed
        """
        with self._lock:
            return self._sweep(self._clock())

    def _maybe_sweep(self, now: float) -> None:
        if self._check_period and now - self._last_sweep >= self._check_period:
            self._sweep(now)

    def _sweep(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        self._stats["expired"] += len(expired)
        self._last_sweep = now
        if expired:
            logger.debug("Cache sweep removed %d expired entries", len(expired))
        return len(expired)

    def count_all(self) -> int:
        """Count live entries."""
        with self._lock:
            now = self._clock()
            return sum(1 for entry in self._entries.values() if not entry.is_expired(now))

    def health_check(self) -> bool:
        """An in-process store is always reachable."""
        return True

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with hit/miss counters and entry count
        """
        with self._lock:
            stats = dict(self._stats)
        stats["backend"] = "memory"
        stats["keys"] = self.count_all()
        stats["default_ttl"] = self._default_ttl
        return stats
