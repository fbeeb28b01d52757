"""Pure helpers: cache key derivation and text sanitization."""

from .cache_keys import compact_history, derive
from .text_sanitizer import clean

__all__ = [
    "clean",
    "compact_history",
    "derive",
]
