"""Debate turn service.

Chains classification and generation for a whole assistant turn.
"""

import logging
from collections.abc import Sequence

from debate_core.entities import ConversationTurn, DebateReply, Policy
from debate_core.protocols import ModelClient

from .cache_service import CacheService
from .prompt_composer import PromptComposer
from .response_orchestrator import ResponseOrchestrator
from .stance_classifier import StanceClassifier

logger = logging.getLogger(__name__)


class DebateService:
    """Entry point for producing the assistant's side of a debate.

    Example:
        ```python
        debate = DebateService.create(model_client=client, cache=cache)

        opening = await debate.open("Remote work is better than office work")
        reply = await debate.respond("But offices help juniors learn", history)
        ```
    """

    def __init__(
        self,
        classifier: StanceClassifier,
        orchestrator: ResponseOrchestrator,
        composer: PromptComposer,
    ) -> None:
        self._classifier = classifier
        self._orchestrator = orchestrator
        self._composer = composer

    @classmethod
    def create(
        cls,
        model_client: ModelClient,
        cache: CacheService,
        restate_policy: bool | None = None,
    ) -> "DebateService":
        """Factory method wiring classifier and orchestrator to shared deps.

        Args:
            model_client: Text-generation backend (required).
            cache: Shared cache service (required).
            restate_policy: Re-send stance/depth on later turns. If None, uses settings.

        Returns:
            Configured DebateService
        """
        composer = PromptComposer(restate_policy=restate_policy)
        return cls(
            classifier=StanceClassifier(model_client, cache, composer=composer),
            orchestrator=ResponseOrchestrator(model_client, cache, composer=composer),
            composer=composer,
        )

    async def classify(self, message: str, history: Sequence[ConversationTurn]) -> Policy:
        """Policy the next reply would use."""
        return await self._classifier.classify(message, history)

    async def respond(
        self,
        message: str,
        history: Sequence[ConversationTurn],
    ) -> DebateReply:
        """Produce the assistant reply to ``message``.

        Raises:
            ModelInvocationError: If generation fails
        """
        policy = await self._classifier.classify(message, history)
        logger.info(
            "Responding with stance=%s depth=%s (history=%d turns)",
            policy.stance.value,
            policy.depth.value,
            len(history),
        )
        text = await self._orchestrator.generate(message, history, policy)
        return DebateReply(text=text, policy=policy)

    async def open(self, topic: str) -> DebateReply:
        """Produce the opening perspective for a new debate on ``topic``.

        Raises:
            ModelInvocationError: If generation fails
        """
        return await self.respond(self._composer.opening_prompt(topic), [])
