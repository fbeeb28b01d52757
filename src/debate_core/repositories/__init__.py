"""Repository layer for data access and external backends.

This layer hides external dependencies (Redis, model HTTP APIs) behind the
protocol-based interfaces in ``debate_core.protocols``. This enables:
- Easy swapping of implementations (in-process -> Redis, Gemini -> Ollama)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from debate_core.protocols import CacheStore, ModelClient

from .gemini_model_client import GeminiModelClient
from .memory_cache_repository import MemoryCacheRepository
from .ollama_model_client import OllamaModelClient
from .redis_cache_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "ModelClient",
    "MemoryCacheRepository",
    "RedisCacheRepository",
    "GeminiModelClient",
    "OllamaModelClient",
]
