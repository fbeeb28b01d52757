import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Model backend
    model_provider: str = os.getenv("MODEL_PROVIDER", "gemini")  # or "ollama"
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    gemini_base_url: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    ollama_base_url: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = os.getenv("OLLAMA_MODEL", "llama3.1")
    model_timeout: float = float(os.getenv("MODEL_TIMEOUT", "60"))

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory")  # or "redis"
    cache_default_ttl: int = int(os.getenv("CACHE_DEFAULT_TTL", "3600"))  # 1 hour
    cache_check_period: int = int(os.getenv("CACHE_CHECK_PERIOD", "600"))  # 10 minutes
    response_cache_ttl: int = int(os.getenv("RESPONSE_CACHE_TTL", "3600"))
    sentiment_cache_ttl: int = int(os.getenv("SENTIMENT_CACHE_TTL", "1800"))
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "debate_core")

    # Redis (only used when CACHE_BACKEND=redis)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Prompting
    restate_policy: bool = os.getenv("RESTATE_POLICY", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.model_provider not in ("gemini", "ollama"):
            raise ValueError(
                f"MODEL_PROVIDER must be one of ['gemini', 'ollama'], got {self.model_provider}"
            )

        if self.cache_backend not in ("memory", "redis"):
            raise ValueError(
                f"CACHE_BACKEND must be one of ['memory', 'redis'], got {self.cache_backend}"
            )

        for name in ("cache_default_ttl", "response_cache_ttl", "sentiment_cache_ttl"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name.upper()} must be a positive number of seconds")

        if self.cache_check_period < 0:
            raise ValueError("CACHE_CHECK_PERIOD must be zero (disabled) or positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
