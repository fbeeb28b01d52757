"""Cache storage protocol.

Defines the interface for a TTL key-value store shared by the response
cache and the sentiment-decision cache.

Implementations can include:
- In-process dictionary with lazy expiry and a periodic sweep (default)
- Redis
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed.

    "Absent" covers both never-set and expired keys; callers never need to
    tell them apart.
    """

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value.

        Args:
            key: The cache key
            value: The value to cache
            ttl: Time-to-live in seconds (store default when None)

        Returns:
            True if the value was stored
        """
        ...

    def get(self, key: str) -> Any | None:
        """Get a value.

        Args:
            key: The cache key

        Returns:
            The cached value, or None if absent or expired
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete a value.

        Args:
            key: The cache key

        Returns:
            True if an entry was deleted, False otherwise
        """
        ...

    def clear(self) -> None:
        """Remove every entry."""
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
