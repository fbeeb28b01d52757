"""Redis implementation of CacheStore.

Values are JSON-encoded strings stored with ``SET ... EX`` under a key
prefix, so ``clear`` only touches this store's own keys.
"""

import json
import logging
from typing import Any

import redis

from debate_core.config import get_redis_client, settings

logger = logging.getLogger(__name__)


class RedisCacheRepository:
    """Redis-backed TTL key-value store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Only JSON-serializable values can be stored: the services cache
    sanitized text and ``Policy.to_dict()`` payloads, which both are.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
        default_ttl: int | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for every key. Defaults to settings.
            default_ttl: TTL used when ``set`` gets none. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix
        self._default_ttl = settings.cache_default_ttl if default_ttl is None else default_ttl

    @classmethod
    def create(
        cls,
        key_prefix: str | None = None,
        default_ttl: int | None = None,
    ) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            key_prefix: Key prefix. If None, uses settings.
            default_ttl: Default TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(key_prefix=key_prefix, default_ttl=default_ttl)

    def _full_key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a JSON-encoded value with an expiry."""
        ttl = self._default_ttl if ttl is None else ttl
        if ttl <= 0:
            return False
        result = self._client.set(self._full_key(key), json.dumps(value), ex=ttl)
        logger.debug("Cache item set key=%s ttl=%s", key, ttl)
        return bool(result)

    def get(self, key: str) -> Any | None:
        """Return the decoded value for ``key`` or None."""
        raw = self._client.get(self._full_key(key))
        logger.debug("Cache access key=%s hit=%s", key, raw is not None)
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode()
        return json.loads(raw)

    def delete(self, key: str) -> bool:
        """Delete a specific entry by key."""
        result: int = self._client.delete(self._full_key(key))  # type: ignore[assignment]
        return result > 0

    def clear(self) -> None:
        """Delete every key under this store's prefix."""
        keys = list(self._client.scan_iter(match=f"{self._prefix}:*"))
        if keys:
            self._client.delete(*keys)
        logger.info("Cache cleared (%d keys)", len(keys))

    def count_all(self) -> int:
        """Count entries under this store's prefix."""
        return sum(1 for _ in self._client.scan_iter(match=f"{self._prefix}:*"))

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def get_stats(self) -> dict:
        """Get repository statistics.

        Returns:
            Dictionary with stats
        """
        return {
            "backend": "redis",
            "key_prefix": self._prefix,
            "keys": self.count_all(),
            "default_ttl": self._default_ttl,
        }

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
