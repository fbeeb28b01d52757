"""
Shared fixtures for the debate core tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from debate_core.entities import ConversationTurn, GenerationParams, ModelTurn, Sender
from debate_core.repositories import MemoryCacheRepository
from debate_core.services import CacheService


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeModelClient:
    """Records every call and answers from a list of replies (or raises)."""

    model_name = "fake-model"

    def __init__(self, replies: list[str] | None = None, error: Exception | None = None) -> None:
        self.replies = list(replies or ["reply"])
        self.error = error
        self.calls: list[tuple[str, list[ModelTurn], GenerationParams]] = []

    async def invoke(self, prompt: str, history: list[ModelTurn], params: GenerationParams) -> str:
        self.calls.append((prompt, list(history), params))
        if self.error is not None:
            raise self.error
        index = min(len(self.calls) - 1, len(self.replies) - 1)
        return self.replies[index]

    async def is_available(self) -> bool:
        return self.error is None


class BrokenStore:
    """A CacheStore whose every operation fails."""

    def set(self, key, value, ttl=None):
        raise ConnectionError("store down")

    def get(self, key):
        raise ConnectionError("store down")

    def delete(self, key):
        raise ConnectionError("store down")

    def clear(self):
        raise ConnectionError("store down")

    def health_check(self):
        raise ConnectionError("store down")

    def get_stats(self):
        raise ConnectionError("store down")


def make_history(count: int) -> list[ConversationTurn]:
    """Alternating user/assistant turns, oldest first."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        ConversationTurn(
            sender=Sender.USER if i % 2 == 0 else Sender.ASSISTANT,
            content=f"turn {i} content",
            created_at=start + timedelta(minutes=i),
        )
        for i in range(count)
    ]


@pytest.fixture
def clock():
    """A controllable clock."""
    return FakeClock()


@pytest.fixture
def store(clock):
    """In-process store on the fake clock."""
    return MemoryCacheRepository(default_ttl=3600, check_period=600, clock=clock)


@pytest.fixture
def cache(store):
    """Cache service over the in-process store."""
    return CacheService(store=store)
