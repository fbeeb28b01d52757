"""Cached, sanitized generation of debate replies."""

import logging
from collections.abc import Callable, Sequence

from debate_core.config import settings
from debate_core.entities import (
    ConversationTurn,
    GenerationParams,
    ModelTurn,
    Policy,
    Sender,
    Stance,
)
from debate_core.exceptions import ModelInvocationError
from debate_core.protocols import ModelClient
from debate_core.utils import clean, compact_history, derive

from .cache_service import CacheService
from .prompt_composer import PromptComposer

logger = logging.getLogger(__name__)

RESPONSE_PURPOSE = "response"

__all__ = ["ModelInvocationError", "ResponseOrchestrator"]


class ResponseOrchestrator:
    """Produces the final reply text for one turn.

    Flow: cache lookup -> compose prompt -> model call -> sanitize -> cache
    store. Only non-empty sanitized text is ever cached, and nothing is
    cached when the model call fails.

    Classification is not done here: callers pass the policy they got from
    StanceClassifier (or none, for neutral/deep).
    """

    def __init__(
        self,
        model_client: ModelClient,
        cache: CacheService,
        composer: PromptComposer | None = None,
        sanitizer: Callable[[str], str] = clean,
        ttl: int | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            model_client: Text-generation backend.
            cache: Shared cache service.
            composer: Prompt composer. Defaults to a new one.
            sanitizer: Output cleanup function. Defaults to ``utils.clean``.
            ttl: Lifetime of cached replies. Defaults to settings.response_cache_ttl.
        """
        self._model = model_client
        self._cache = cache
        self._composer = composer or PromptComposer()
        self._sanitize = sanitizer
        self._ttl = settings.response_cache_ttl if ttl is None else ttl

    @staticmethod
    def generation_params(policy: Policy) -> GenerationParams:
        """Sampling parameters; challenging replies run a little hotter."""
        return GenerationParams(
            temperature=0.8 if policy.stance == Stance.CHALLENGING else 0.7,
            top_k=40,
            top_p=0.95,
            max_output_tokens=800,
        )

    @staticmethod
    def to_model_turns(history: Sequence[ConversationTurn]) -> list[ModelTurn]:
        """Re-express history in the model's own turn format."""
        return [
            ModelTurn(role="user" if turn.sender == Sender.USER else "model", text=turn.content)
            for turn in history
        ]

    @staticmethod
    def cache_key(user_text: str, history: Sequence[ConversationTurn], policy: Policy) -> str:
        """Fingerprint of the message, the full history and the policy."""
        return derive(
            RESPONSE_PURPOSE,
            user_text,
            compact_history(history),
            policy.stance,
            policy.depth,
        )

    async def generate(
        self,
        user_text: str,
        history: Sequence[ConversationTurn],
        policy: Policy | None = None,
    ) -> str:
        """Generate (or reuse) the reply to ``user_text``.

        Args:
            user_text: The user's message
            history: Earlier turns, oldest first
            policy: Stance/depth to use. Defaults to neutral/deep.

        Returns:
            Sanitized reply text

        Raises:
            ModelInvocationError: If the model call fails
        """
        policy = policy or Policy.default()
        key = self.cache_key(user_text, history, policy)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Response cache hit key=%s", key)
            return cached

        prompt = self._composer.compose(user_text, policy, is_first_turn=len(history) == 0)
        params = self.generation_params(policy)

        try:
            raw = await self._model.invoke(prompt, self.to_model_turns(history), params)
        except Exception as e:
            logger.error("Error generating AI response: %s", e)
            raise ModelInvocationError("Failed to generate AI response") from e

        text = self._sanitize(raw)
        if not text:
            logger.warning("Model reply was empty after sanitizing, not caching key=%s", key)
            return text
        self._cache.set(key, text, self._ttl)
        return text
