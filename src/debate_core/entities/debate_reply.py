"""Debate reply domain entity."""

from dataclasses import dataclass

from .policy import Policy


@dataclass(frozen=True)
class DebateReply:
    """The assistant's side of one debate turn.

    Attributes:
        text: Sanitized reply text
        policy: The stance/depth the reply was generated under
    """

    text: str
    policy: Policy
