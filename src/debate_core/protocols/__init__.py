"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-process -> Redis, Gemini -> Ollama, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from debate_core.protocols import CacheStore, ModelClient

    # Type hints work with any implementation
    store: CacheStore = MemoryCacheRepository()  # works
    store: CacheStore = RedisCacheRepository()   # also works
    ```
"""

from .cache_store import CacheStore
from .model_client import ModelClient

__all__ = [
    "CacheStore",
    "ModelClient",
]
