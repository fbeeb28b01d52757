"""Debate Core - response orchestration for a conversational debate assistant.

This package decides the stance and depth of each assistant turn, composes
the model prompt, caches model invocations and sanitizes model output into
plain conversational text.

Layers:
    - protocols: Interface contracts (CacheStore, ModelClient)
    - repositories: Cache stores and model backends
    - services: Business logic (classifier, composer, orchestrator)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)
    - utils: Pure helpers (cache keys, text sanitizer)

Usage:
    ```python
    from debate_core.repositories import GeminiModelClient, MemoryCacheRepository
    from debate_core.services import CacheService, DebateService

    cache = CacheService.create(store=MemoryCacheRepository.create())
    debate = DebateService.create(model_client=GeminiModelClient.create(), cache=cache)
    ```

For HTTP API:
    ```python
    from debate_core.api.app import app
    ```
"""

from debate_core.config import get_settings, settings
from debate_core.entities import (
    ConversationTurn,
    DebateReply,
    Depth,
    GenerationParams,
    ModelTurn,
    Policy,
    Sender,
    Stance,
)
from debate_core.exceptions import DebateCoreError, ModelClientError, ModelInvocationError
from debate_core.protocols import CacheStore, ModelClient
from debate_core.repositories import (
    GeminiModelClient,
    MemoryCacheRepository,
    OllamaModelClient,
    RedisCacheRepository,
)
from debate_core.services import (
    CacheService,
    DebateService,
    PromptComposer,
    ResponseOrchestrator,
    StanceClassifier,
)
from debate_core.utils import clean, compact_history, derive

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "CacheStore",
    "ModelClient",
    # Services (business logic)
    "CacheService",
    "DebateService",
    "PromptComposer",
    "ResponseOrchestrator",
    "StanceClassifier",
    # Repositories (stores and backends)
    "MemoryCacheRepository",
    "RedisCacheRepository",
    "GeminiModelClient",
    "OllamaModelClient",
    # Entities (domain models)
    "ConversationTurn",
    "DebateReply",
    "Depth",
    "GenerationParams",
    "ModelTurn",
    "Policy",
    "Sender",
    "Stance",
    # Errors
    "DebateCoreError",
    "ModelClientError",
    "ModelInvocationError",
    # Pure helpers
    "clean",
    "compact_history",
    "derive",
]
