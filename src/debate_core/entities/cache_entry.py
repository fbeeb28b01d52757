"""Cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntryEntity:
    """A value held by the in-process cache store.

    Attributes:
        value: The cached value (policy, sanitized text, ...)
        expires_at: Monotonic-clock time after which the entry is dead
    """

    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Return True once ``now`` has reached the expiry time."""
        return now >= self.expires_at
