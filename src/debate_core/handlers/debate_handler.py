"""HTTP handlers for debate and cache operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error mapping.
"""

import logging
import time

from fastapi import HTTPException, status

from debate_core.dto import (
    CacheClearResponse,
    CacheDeleteResponse,
    CacheStatsResponse,
    ClassifyRequest,
    CleanTextRequest,
    CleanTextResponse,
    DebateReplyResponse,
    HealthCheckResponse,
    OpenDebateRequest,
    PolicyItem,
    RespondRequest,
)
from debate_core.entities import DebateReply
from debate_core.exceptions import ModelInvocationError
from debate_core.protocols import ModelClient
from debate_core.services import CacheService, DebateService
from debate_core.utils import clean

logger = logging.getLogger(__name__)


class DebateHandler:
    """HTTP handlers for debate operations.

    This handler delegates business logic to DebateService and CacheService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping ModelInvocationError to 502 Bad Gateway
    """

    def __init__(
        self,
        debate_service: DebateService,
        cache_service: CacheService,
        model_client: ModelClient,
    ) -> None:
        """Initialize the debate handler.

        Args:
            debate_service: The debate service for business logic (required).
            cache_service: The shared cache service (required).
            model_client: The model client, for health reporting (required).
        """
        self._debate = debate_service
        self._cache = cache_service
        self._model = model_client

    @staticmethod
    def _reply_response(reply: DebateReply, start_time: float) -> DebateReplyResponse:
        return DebateReplyResponse(
            reply=reply.text,
            policy=PolicyItem.from_entity(reply.policy),
            generation_time_ms=(time.time() - start_time) * 1000,
        )

    async def open_debate(self, request: OpenDebateRequest) -> DebateReplyResponse:
        """Handle POST /debate/open requests.

        Raises:
            HTTPException: 502 if the model call fails
        """
        start_time = time.time()
        try:
            reply = await self._debate.open(request.topic)
        except ModelInvocationError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to start debate: {e.message}",
            ) from e
        return self._reply_response(reply, start_time)

    async def respond(self, request: RespondRequest) -> DebateReplyResponse:
        """Handle POST /debate/respond requests.

        Raises:
            HTTPException: 502 if the model call fails
        """
        start_time = time.time()
        try:
            reply = await self._debate.respond(request.message, request.history_entities())
        except ModelInvocationError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to process message: {e.message}",
            ) from e
        return self._reply_response(reply, start_time)

    async def classify(self, request: ClassifyRequest) -> PolicyItem:
        """Handle POST /debate/classify requests (never fails)."""
        policy = await self._debate.classify(request.message, request.history_entities())
        return PolicyItem.from_entity(policy)

    async def clean_text(self, request: CleanTextRequest) -> CleanTextResponse:
        """Handle POST /text/clean requests."""
        return CleanTextResponse(text=clean(request.text))

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        stats = self._cache.get_stats()
        return CacheStatsResponse(
            backend=stats.get("backend", "unknown"),
            keys=stats.get("keys", 0),
            hits=stats.get("hits"),
            misses=stats.get("misses"),
            default_ttl=stats.get("default_ttl"),
        )

    async def clear_cache(self) -> CacheClearResponse:
        """Handle DELETE /cache requests."""
        self._cache.clear()
        return CacheClearResponse(success=True, message="Cache cleared successfully")

    async def delete_cache_entry(self, key: str) -> CacheDeleteResponse:
        """Handle DELETE /cache/{key} requests."""
        return CacheDeleteResponse(key=key, deleted=self._cache.delete(key))

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        cache_healthy = self._cache.is_healthy()
        return HealthCheckResponse(
            status="healthy" if cache_healthy else "unhealthy",
            cache_healthy=cache_healthy,
            model=self._model.model_name,
        )
