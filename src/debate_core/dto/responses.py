"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from debate_core.entities import Depth, Policy, Stance


class PolicyItem(BaseModel):
    """Stance/depth pair."""

    stance: Stance = Field(..., description="supportive, challenging or neutral")
    depth: Depth = Field(..., description="surface, deep or expert")

    @classmethod
    def from_entity(cls, policy: Policy) -> "PolicyItem":
        return cls(stance=policy.stance, depth=policy.depth)


class DebateReplyResponse(BaseModel):
    """Response DTO for an assistant reply."""

    reply: str = Field(..., description="Sanitized assistant reply")
    policy: PolicyItem = Field(..., description="Policy the reply was generated under")
    generation_time_ms: float = Field(..., description="Time taken to produce the reply")


class CleanTextResponse(BaseModel):
    """Response DTO for text sanitization."""

    text: str = Field(..., description="Sanitized text")


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    backend: str = Field(..., description="Cache backend: 'memory' or 'redis'")
    keys: int = Field(..., description="Number of live entries", ge=0)
    hits: int | None = Field(None, description="Cache hits (in-process backend only)")
    misses: int | None = Field(None, description="Cache misses (in-process backend only)")
    default_ttl: int | None = Field(None, description="Default TTL in seconds")


class CacheClearResponse(BaseModel):
    """Response DTO for clearing the cache."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable status message")


class CacheDeleteResponse(BaseModel):
    """Response DTO for deleting one cache entry."""

    key: str = Field(..., description="The deleted key")
    deleted: bool = Field(..., description="Whether a live entry was removed")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    model: str = Field(..., description="Configured model identifier")
