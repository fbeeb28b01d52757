"""Conversation turn domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Sender(str, Enum):
    """Who wrote a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"

    @classmethod
    def parse(cls, value: "str | Sender") -> "Sender":
        """Parse a sender value, accepting the legacy ``"ai"`` spelling."""
        if isinstance(value, Sender):
            return value
        normalized = value.strip().lower()
        if normalized in ("ai", "model"):
            return cls.ASSISTANT
        return cls(normalized)


@dataclass(frozen=True)
class ConversationTurn:
    """A single persisted message of a debate.

    History is owned by the persistence layer and handed to the core as an
    ordered, read-only sequence (oldest first).

    Attributes:
        sender: Who wrote the turn
        content: The message text
        created_at: When the turn was persisted
    """

    sender: Sender
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def compact(self, limit: int = 100) -> str:
        """Short fingerprint form used in cache keys: ``sender:content[:limit]``.

        Backslashes, ``|`` and ``:`` in the content are backslash-escaped so a
        turn's text can never pass for a separator between turns.
        """
        preview = self.content[:limit]
        escaped = preview.replace("\\", "\\\\").replace("|", "\\|").replace(":", "\\:")
        return f"{self.sender.value}:{escaped}"
