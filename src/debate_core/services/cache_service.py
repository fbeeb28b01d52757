"""Cache service shared by the response and sentiment caches.

Wraps a CacheStore so that store failures never reach callers: a failing
read is a miss, a failing write or delete is a no-op. Both are logged.
"""

import logging
from typing import Any

from debate_core.config import settings
from debate_core.protocols import CacheStore
from debate_core.repositories import MemoryCacheRepository, RedisCacheRepository

logger = logging.getLogger(__name__)


class CacheService:
    """Fault-tolerant facade over a CacheStore.

    The store instance is built by the process entry point and passed in;
    every component that caches receives this same service by reference.

    Example:
        ```python
        from debate_core.repositories import MemoryCacheRepository
        from debate_core.services import CacheService

        cache = CacheService.create(store=MemoryCacheRepository.create())
        cache.set("response:hi", "Hello!", ttl=3600)
        ```
    """

    def __init__(self, store: CacheStore) -> None:
        """Initialize the cache service.

        Args:
            store: Cache storage backend (required).
        """
        self._store = store

    @classmethod
    def create(cls, store: CacheStore | None = None) -> "CacheService":
        """Factory method to create CacheService with the configured backend.

        Args:
            store: Cache storage backend. If None, builds the one named by
                settings.cache_backend.

        Returns:
            Configured CacheService
        """
        if store is None:
            if settings.cache_backend == "redis":
                store = RedisCacheRepository.create()
            else:
                store = MemoryCacheRepository.create()
        return cls(store=store)

    def get(self, key: str) -> Any | None:
        """Get a cached value; store failures read as a miss."""
        try:
            return self._store.get(key)
        except Exception as e:
            logger.error("Error getting cache item key=%s: %s", key, e)
            return None

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Cache a value; store failures return False."""
        try:
            return self._store.set(key, value, ttl)
        except Exception as e:
            logger.error("Error setting cache item key=%s: %s", key, e)
            return False

    def delete(self, key: str) -> bool:
        """Delete a cached value; store failures return False."""
        try:
            return self._store.delete(key)
        except Exception as e:
            logger.error("Error deleting cache item key=%s: %s", key, e)
            return False

    def clear(self) -> None:
        """Clear the whole store; store failures are logged only."""
        try:
            self._store.clear()
        except Exception as e:
            logger.error("Error clearing cache: %s", e)

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics (empty if the store fails)
        """
        try:
            return self._store.get_stats()
        except Exception as e:
            logger.error("Error reading cache stats: %s", e)
            return {}

    def is_healthy(self) -> bool:
        """Check if the store is reachable."""
        try:
            return self._store.health_check()
        except Exception:
            return False

    @property
    def store(self) -> CacheStore:
        """Get the underlying store (for testing)."""
        return self._store
