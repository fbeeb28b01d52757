"""Per-turn stance and depth classification."""

import logging
import re
from collections.abc import Sequence

from debate_core.config import settings
from debate_core.entities import ConversationTurn, Depth, GenerationParams, Policy, Stance
from debate_core.protocols import ModelClient
from debate_core.utils import compact_history, derive

from .cache_service import CacheService
from .prompt_composer import SENTIMENT_WINDOW, PromptComposer

logger = logging.getLogger(__name__)

SENTIMENT_PURPOSE = "sentiment"

# Conversations shorter than this always open with a counter-stance.
BOOTSTRAP_TURNS = 3

ANALYSIS_PARAMS = GenerationParams(temperature=0.1, max_output_tokens=100)

_STANCE_PATTERN = re.compile(
    r"stance:\s*(" + "|".join(s.value for s in Stance) + r")", re.IGNORECASE
)
_DEPTH_PATTERN = re.compile(
    r"depth:\s*(" + "|".join(d.value for d in Depth) + r")", re.IGNORECASE
)


def parse_policy(analysis: str) -> Policy:
    """Parse a ``stance: <value>, depth: <value>`` line.

    Each field is extracted independently; one that cannot be found keeps
    its default (neutral stance, deep depth).
    """
    default = Policy.default()

    stance_match = _STANCE_PATTERN.search(analysis)
    stance = Stance(stance_match.group(1).lower()) if stance_match else default.stance

    depth_match = _DEPTH_PATTERN.search(analysis)
    depth = Depth(depth_match.group(1).lower()) if depth_match else default.depth

    return Policy(stance=stance, depth=depth)


class StanceClassifier:
    """Decides the policy for the next assistant turn.

    Never raises: any cache or model failure degrades to
    ``Policy.default()``.
    """

    def __init__(
        self,
        model_client: ModelClient,
        cache: CacheService,
        composer: PromptComposer | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            model_client: Backend used for ambiguous (longer) conversations.
            cache: Shared cache service.
            composer: Prompt composer. Defaults to a new one.
            ttl: Lifetime of cached decisions. Defaults to settings.sentiment_cache_ttl.
        """
        self._model = model_client
        self._cache = cache
        self._composer = composer or PromptComposer()
        self._ttl = settings.sentiment_cache_ttl if ttl is None else ttl

    @staticmethod
    def cache_key(message: str, history: Sequence[ConversationTurn]) -> str:
        """Fingerprint of the message and the last three turns."""
        return derive(SENTIMENT_PURPOSE, message, compact_history(history, last=SENTIMENT_WINDOW))

    async def classify(self, message: str, history: Sequence[ConversationTurn]) -> Policy:
        """Choose stance and depth for replying to ``message``.

        Args:
            message: The user's new message
            history: Earlier turns, oldest first

        Returns:
            The policy for the next reply
        """
        if len(history) < BOOTSTRAP_TURNS:
            return Policy.opening()

        key = self.cache_key(message, history)
        try:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("Sentiment cache hit key=%s", key)
                return Policy.from_dict(cached)

            prompt = self._composer.sentiment_prompt(message, history)
            analysis = await self._model.invoke(prompt, [], ANALYSIS_PARAMS)
            policy = parse_policy(analysis)

            self._cache.set(key, policy.to_dict(), self._ttl)
            return policy
        except Exception as e:
            logger.warning("Error analyzing sentiment, using default policy: %s", e)
            return Policy.default()
