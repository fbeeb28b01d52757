from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debate_core.api.dependencies import HandlerDep, lifespan
from debate_core.config import settings
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
from debate_core.protocols import ModelClient
from debate_core.services import CacheService


def create_app(
    model_client: ModelClient | None = None,
    cache_service: CacheService | None = None,
) -> FastAPI:
    """Build the debate API.

    Args:
        model_client: Model backend to use instead of the configured one.
        cache_service: Cache service to use instead of the configured one.

    Returns:
        The FastAPI application
    """
    app = FastAPI(
        title="Debate Core API",
        description="Stance-aware, cached and sanitized debate replies",
        version="0.1.0",
        lifespan=lifespan,
    )
    if model_client is not None:
        app.state.model_client = model_client
    if cache_service is not None:
        app.state.cache_service = cache_service

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Debate Core API",
            "version": "0.1.0",
            "description": "Stance-aware, cached and sanitized debate replies",
            "endpoints": {
                "debate": "/debate",
                "text": "/text/clean",
                "cache": "/cache",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.post("/debate/open", response_model=DebateReplyResponse, status_code=201)
    async def open_debate(request: OpenDebateRequest, handler: HandlerDep) -> DebateReplyResponse:
        """Generate the opening perspective for a new debate topic."""
        return await handler.open_debate(request)

    @app.post("/debate/respond", response_model=DebateReplyResponse)
    async def respond(request: RespondRequest, handler: HandlerDep) -> DebateReplyResponse:
        """Classify the turn, then generate the assistant's reply."""
        return await handler.respond(request)

    @app.post("/debate/classify", response_model=PolicyItem)
    async def classify(request: ClassifyRequest, handler: HandlerDep) -> PolicyItem:
        """Return the stance/depth the next reply would use."""
        return await handler.classify(request)

    @app.post("/text/clean", response_model=CleanTextResponse)
    async def clean_text(request: CleanTextRequest, handler: HandlerDep) -> CleanTextResponse:
        """Strip markdown artifacts from text."""
        return await handler.clean_text(request)

    @app.get("/cache/stats", response_model=CacheStatsResponse)
    async def cache_stats(handler: HandlerDep) -> CacheStatsResponse:
        """Get cache statistics."""
        return await handler.get_stats()

    @app.delete("/cache", response_model=CacheClearResponse)
    async def clear_cache(handler: HandlerDep) -> CacheClearResponse:
        """Clear all entries from the cache."""
        return await handler.clear_cache()

    @app.delete("/cache/{key:path}", response_model=CacheDeleteResponse)
    async def delete_cache_entry(key: str, handler: HandlerDep) -> CacheDeleteResponse:
        """Delete a single cache entry."""
        return await handler.delete_cache_entry(key)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "debate_core.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
