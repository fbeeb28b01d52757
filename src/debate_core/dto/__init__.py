"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    CleanTextRequest,
    ClassifyRequest,
    ConversationTurnItem,
    OpenDebateRequest,
    RespondRequest,
)
from .responses import (
    CacheClearResponse,
    CacheDeleteResponse,
    CacheStatsResponse,
    CleanTextResponse,
    DebateReplyResponse,
    HealthCheckResponse,
    PolicyItem,
)

__all__ = [
    "ConversationTurnItem",
    "ClassifyRequest",
    "RespondRequest",
    "OpenDebateRequest",
    "CleanTextRequest",
    "PolicyItem",
    "DebateReplyResponse",
    "CleanTextResponse",
    "CacheStatsResponse",
    "CacheClearResponse",
    "CacheDeleteResponse",
    "HealthCheckResponse",
]
