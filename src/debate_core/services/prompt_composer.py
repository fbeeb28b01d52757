"""Prompt composition for debate turns."""

from collections.abc import Sequence

from debate_core import prompts
from debate_core.config import settings
from debate_core.entities import ConversationTurn, Policy

SENTIMENT_WINDOW = 3


class PromptComposer:
    """Builds the model-facing prompt text for a policy.

    The full system instruction is only sent on the first turn: after that
    the persona is expected to carry over through the model's own history.
    With ``restate_policy`` enabled, later turns also get the current stance
    and depth fragments, since the policy may change from turn to turn.
    """

    def __init__(self, restate_policy: bool | None = None) -> None:
        self._restate_policy = (
            settings.restate_policy if restate_policy is None else restate_policy
        )

    @staticmethod
    def policy_instruction(policy: Policy) -> str:
        """Stance and depth fragments for ``policy``, space-joined."""
        return " ".join(
            [
                prompts.STANCE_INSTRUCTIONS[policy.stance],
                prompts.DEPTH_INSTRUCTIONS[policy.depth],
            ]
        )

    @classmethod
    def system_instruction(cls, policy: Policy) -> str:
        """The complete persona instruction for ``policy``."""
        return " ".join(
            [
                prompts.BASE_PERSONA,
                cls.policy_instruction(policy),
                prompts.RESPONSE_STRUCTURE,
                prompts.FORMATTING_CONSTRAINTS,
            ]
        )

    def compose(self, user_text: str, policy: Policy, is_first_turn: bool) -> str:
        """Build the generation prompt.

        Args:
            user_text: The user's message
            policy: Stance/depth for this turn
            is_first_turn: True when there is no prior history

        Returns:
            ``system + "\\n\\nUser query: " + user_text`` on the first turn,
            otherwise ``user_text`` (prefixed with the policy fragments when
            restating is enabled)
        """
        if is_first_turn:
            return f"{self.system_instruction(policy)}\n\n{prompts.USER_QUERY_LABEL}{user_text}"
        if self._restate_policy:
            return f"{self.policy_instruction(policy)}\n\n{prompts.USER_QUERY_LABEL}{user_text}"
        return user_text

    @staticmethod
    def sentiment_prompt(message: str, history: Sequence[ConversationTurn]) -> str:
        """Analysis prompt over the last three turns plus the new message."""
        conversation = "\n".join(
            f"{turn.sender.value.upper()}: {turn.content}"
            for turn in list(history)[-SENTIMENT_WINDOW:]
        )
        return prompts.SENTIMENT_ANALYSIS_TEMPLATE.format(
            conversation=conversation,
            message=message,
        )

    @staticmethod
    def opening_prompt(topic: str) -> str:
        """User-side prompt that opens a debate on ``topic``."""
        return prompts.OPENING_TOPIC_TEMPLATE.format(topic=topic)

    @property
    def restate_policy(self) -> bool:
        return self._restate_policy
