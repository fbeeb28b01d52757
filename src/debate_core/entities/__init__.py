"""Domain entities for internal representation.

These are pure dataclasses and enums used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
- Pure domain logic only
"""

from .cache_entry import CacheEntryEntity
from .conversation_turn import ConversationTurn, Sender
from .debate_reply import DebateReply
from .model_turn import GenerationParams, ModelTurn
from .policy import Depth, Policy, Stance

__all__ = [
    "CacheEntryEntity",
    "ConversationTurn",
    "DebateReply",
    "Depth",
    "GenerationParams",
    "ModelTurn",
    "Policy",
    "Sender",
    "Stance",
]
