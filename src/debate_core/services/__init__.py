"""Service layer for business logic.

This layer contains the response-orchestration core. Services depend on
protocols (interfaces), not concrete implementations, making them testable
with fake model clients and in-process stores.

Architecture:
    Handler -> DebateService -> StanceClassifier / ResponseOrchestrator
                             -> PromptComposer, CacheService -> Repository

Usage:
    ```python
    from debate_core.repositories import GeminiModelClient, MemoryCacheRepository
    from debate_core.services import CacheService, DebateService

    cache = CacheService.create(store=MemoryCacheRepository.create())
    debate = DebateService.create(model_client=GeminiModelClient.create(), cache=cache)
    reply = await debate.respond("Is pineapple a good pizza topping?", history=[])
    ```
"""

from .cache_service import CacheService
from .debate_service import DebateService
from .prompt_composer import PromptComposer
from .response_orchestrator import ModelInvocationError, ResponseOrchestrator
from .stance_classifier import StanceClassifier, parse_policy

__all__ = [
    "CacheService",
    "DebateService",
    "ModelInvocationError",
    "PromptComposer",
    "ResponseOrchestrator",
    "StanceClassifier",
    "parse_policy",
]
