"""
Tests for cached, sanitized reply generation.
"""

import asyncio

import pytest

from debate_core.entities import ConversationTurn, Depth, Policy, Sender, Stance
from debate_core.exceptions import ModelInvocationError
from debate_core.services import CacheService, PromptComposer, ResponseOrchestrator

from conftest import BrokenStore, FakeModelClient, make_history

CHALLENGING = Policy(stance=Stance.CHALLENGING, depth=Depth.DEEP)


class GatedModelClient(FakeModelClient):
    """Holds every call until ``release`` is set, then answers in call order."""

    def __init__(self, replies: list[str]) -> None:
        super().__init__(replies=replies)
        self.release = asyncio.Event()

    async def invoke(self, prompt, history, params):
        self.calls.append((prompt, list(history), params))
        index = len(self.calls) - 1
        await self.release.wait()
        return self.replies[index]


@pytest.mark.asyncio
async def test_repeat_request_is_served_from_cache(cache):
    """The second identical call returns the first call's sanitized text."""
    model = FakeModelClient(replies=["**first** answer", "second answer"])
    orchestrator = ResponseOrchestrator(model, cache)
    history = make_history(2)

    first = await orchestrator.generate("why?", history, CHALLENGING)
    second = await orchestrator.generate("why?", history, CHALLENGING)

    assert first == second == "first answer"
    assert len(model.calls) == 1


@pytest.mark.asyncio
async def test_model_failure_raises_and_caches_nothing(cache):
    """A failing model call surfaces as ModelInvocationError; nothing is stored."""
    cause = RuntimeError("upstream down")
    model = FakeModelClient(error=cause)
    orchestrator = ResponseOrchestrator(model, cache)
    history = make_history(2)

    with pytest.raises(ModelInvocationError) as exc_info:
        await orchestrator.generate("why?", history, CHALLENGING)

    assert exc_info.value.__cause__ is cause
    assert cache.get(ResponseOrchestrator.cache_key("why?", history, CHALLENGING)) is None
    assert cache.store.get_stats()["sets"] == 0
    assert len(model.calls) == 1


@pytest.mark.asyncio
async def test_cached_value_is_sanitized_text(cache):
    model = FakeModelClient(replies=["## Heading\n* point one\n\n\n\n- point two"])
    orchestrator = ResponseOrchestrator(model, cache)

    text = await orchestrator.generate("go", [], CHALLENGING)

    assert text == "Heading\n• point one\n\npoint two"
    assert cache.get(ResponseOrchestrator.cache_key("go", [], CHALLENGING)) == text


@pytest.mark.asyncio
async def test_empty_sanitized_reply_is_not_cached(cache):
    """A reply that is nothing but markup is returned empty, and the next call asks again."""
    model = FakeModelClient(replies=["***", "second"])
    orchestrator = ResponseOrchestrator(model, cache)

    assert await orchestrator.generate("hi", [], CHALLENGING) == ""
    assert cache.get(ResponseOrchestrator.cache_key("hi", [], CHALLENGING)) is None
    assert await orchestrator.generate("hi", [], CHALLENGING) == "second"
    assert len(model.calls) == 2


@pytest.mark.asyncio
async def test_first_turn_prompt_carries_persona(cache):
    model = FakeModelClient()
    orchestrator = ResponseOrchestrator(model, cache, composer=PromptComposer(restate_policy=False))

    await orchestrator.generate("Is pineapple a good pizza topping?", [], CHALLENGING)

    prompt, history, _ = model.calls[0]
    assert prompt == (
        PromptComposer.system_instruction(CHALLENGING)
        + "\n\nUser query: Is pineapple a good pizza topping?"
    )
    assert history == []


@pytest.mark.asyncio
async def test_later_turn_sends_history_in_model_format(cache):
    model = FakeModelClient()
    orchestrator = ResponseOrchestrator(model, cache, composer=PromptComposer(restate_policy=False))
    history = make_history(3)

    await orchestrator.generate("next point", history, CHALLENGING)

    prompt, model_history, _ = model.calls[0]
    assert prompt == "next point"
    assert [(t.role, t.text) for t in model_history] == [
        ("user", "turn 0 content"),
        ("model", "turn 1 content"),
        ("user", "turn 2 content"),
    ]


@pytest.mark.parametrize(
    "stance, temperature",
    [(Stance.CHALLENGING, 0.8), (Stance.SUPPORTIVE, 0.7), (Stance.NEUTRAL, 0.7)],
)
def test_generation_params(stance, temperature):
    params = ResponseOrchestrator.generation_params(Policy(stance=stance, depth=Depth.DEEP))
    assert params.temperature == temperature
    assert params.top_k == 40
    assert params.top_p == 0.95
    assert params.max_output_tokens == 800


@pytest.mark.asyncio
async def test_missing_policy_means_neutral_deep(cache):
    model = FakeModelClient(replies=["one", "two"])
    orchestrator = ResponseOrchestrator(model, cache)

    first = await orchestrator.generate("hi", [])
    second = await orchestrator.generate("hi", [], Policy.default())

    assert first == second == "one"
    assert model.calls[0][2].temperature == 0.7


@pytest.mark.asyncio
async def test_policy_is_part_of_the_key(cache):
    model = FakeModelClient(replies=["one", "two"])
    orchestrator = ResponseOrchestrator(model, cache)

    assert await orchestrator.generate("hi", [], CHALLENGING) == "one"
    assert await orchestrator.generate("hi", [], Policy.default()) == "two"


def test_full_history_is_part_of_the_key():
    history = make_history(5)
    changed = [ConversationTurn(Sender.USER, "a different opening")] + history[1:]
    assert ResponseOrchestrator.cache_key("m", history, CHALLENGING) != (
        ResponseOrchestrator.cache_key("m", changed, CHALLENGING)
    )


def test_turn_text_cannot_imitate_a_turn_boundary():
    """One turn containing separators keys differently from two real turns."""
    merged = [ConversationTurn(Sender.USER, "x|assistant:y")]
    split = [ConversationTurn(Sender.USER, "x"), ConversationTurn(Sender.ASSISTANT, "y")]
    assert ResponseOrchestrator.cache_key("m", merged, Policy.default()) != (
        ResponseOrchestrator.cache_key("m", split, Policy.default())
    )


@pytest.mark.asyncio
async def test_cached_reply_expires(cache, clock):
    model = FakeModelClient(replies=["one", "two"])
    orchestrator = ResponseOrchestrator(model, cache, ttl=3600)

    await orchestrator.generate("hi", [], CHALLENGING)
    clock.advance(3600)
    assert await orchestrator.generate("hi", [], CHALLENGING) == "two"


@pytest.mark.asyncio
async def test_zero_ttl_disables_reply_caching(cache):
    model = FakeModelClient(replies=["one", "two"])
    orchestrator = ResponseOrchestrator(model, cache, ttl=0)

    assert await orchestrator.generate("hi", [], CHALLENGING) == "one"
    assert await orchestrator.generate("hi", [], CHALLENGING) == "two"
    assert cache.store.get_stats()["sets"] == 0


@pytest.mark.asyncio
async def test_broken_cache_still_generates():
    model = FakeModelClient(replies=["*fine*", "again"])
    orchestrator = ResponseOrchestrator(model, CacheService(store=BrokenStore()))

    assert await orchestrator.generate("hi", [], CHALLENGING) == "fine"
    assert await orchestrator.generate("hi", [], CHALLENGING) == "again"


@pytest.mark.asyncio
async def test_concurrent_identical_requests_both_call_the_model(cache):
    """No single-flight: both callers miss, both invoke, the last writer wins."""
    model = GatedModelClient(replies=["first", "second"])
    orchestrator = ResponseOrchestrator(model, cache)
    history = make_history(2)

    tasks = asyncio.gather(
        orchestrator.generate("why?", history, CHALLENGING),
        orchestrator.generate("why?", history, CHALLENGING),
    )
    while len(model.calls) < 2:
        await asyncio.sleep(0)
    model.release.set()
    first, second = await tasks

    assert (first, second) == ("first", "second")
    assert len(model.calls) == 2
    assert cache.store.count_all() == 1
    assert cache.get(ResponseOrchestrator.cache_key("why?", history, CHALLENGING)) == "second"
