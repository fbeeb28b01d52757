"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from debate_core.config import settings
from debate_core.handlers import DebateHandler
from debate_core.logging_config import setup_logging
from debate_core.protocols import ModelClient
from debate_core.repositories import GeminiModelClient, OllamaModelClient
from debate_core.services import CacheService, DebateService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> DebateHandler:
    """Dependency injection for DebateHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "debate_handler", None)
    if handler is None:
        raise RuntimeError("DebateHandler not initialized. Check lifespan setup.")
    return handler


def build_model_client() -> ModelClient:
    """Model client named by settings.model_provider."""
    if settings.model_provider == "ollama":
        return OllamaModelClient.create()
    return GeminiModelClient.create()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Model client and cache service - taken from app.state when already
       set (tests inject fakes), otherwise built from settings
    2. Service (business logic) - stored in app.state.debate_service
    3. Handler (HTTP endpoints) - stored in app.state.debate_handler

    The cache service built here is the single instance shared by every
    component for the lifetime of the process.
    """
    setup_logging(settings.log_level)

    model_client = getattr(app.state, "model_client", None) or build_model_client()
    cache_service = getattr(app.state, "cache_service", None) or CacheService.create()

    debate_service = DebateService.create(model_client=model_client, cache=cache_service)
    debate_handler = DebateHandler(
        debate_service=debate_service,
        cache_service=cache_service,
        model_client=model_client,
    )

    app.state.model_client = model_client
    app.state.cache_service = cache_service
    app.state.debate_service = debate_service
    app.state.debate_handler = debate_handler

    logger.info("Debate service initialized (model=%s)", model_client.model_name)
    logger.info("Cache healthy: %s", cache_service.is_healthy())

    yield

    close = getattr(model_client, "close", None)
    if close is not None:
        await close()

    del app.state.debate_handler
    del app.state.debate_service
    del app.state.cache_service
    del app.state.model_client
    logger.info("Debate service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[DebateHandler, Depends(get_handler)]
