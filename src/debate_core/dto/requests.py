"""Request DTOs for API endpoints."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

from debate_core.entities import ConversationTurn, Sender


class ConversationTurnItem(BaseModel):
    """One persisted turn, as supplied by the caller.

    The persistence layer owns history; the API is stateless and receives
    the turns it needs with every request.
    """

    sender: Literal["user", "assistant", "ai"] = Field(
        ..., description="Who wrote the turn ('ai' is accepted as 'assistant')"
    )
    content: str = Field(..., description="The message text")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the turn was persisted",
    )

    def to_entity(self) -> ConversationTurn:
        return ConversationTurn(
            sender=Sender.parse(self.sender),
            content=self.content,
            created_at=self.created_at,
        )


class ClassifyRequest(BaseModel):
    """Request DTO for choosing the next policy."""

    message: str = Field(..., description="The user's new message", min_length=1)
    history: list[ConversationTurnItem] = Field(
        default_factory=list,
        description="Earlier turns, oldest first",
    )

    def history_entities(self) -> list[ConversationTurn]:
        return [turn.to_entity() for turn in self.history]


class RespondRequest(ClassifyRequest):
    """Request DTO for producing the assistant's reply to a message."""


class OpenDebateRequest(BaseModel):
    """Request DTO for opening a debate on a topic."""

    topic: str = Field(..., description="The debate topic", min_length=1)


class CleanTextRequest(BaseModel):
    """Request DTO for sanitizing arbitrary text."""

    text: str = Field(..., description="Raw text to sanitize")
