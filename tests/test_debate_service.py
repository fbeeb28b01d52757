"""
Tests for whole debate turns (classify, then generate).
"""


import pytest

from debate_core.entities import Depth, Policy, Stance
from debate_core.exceptions import ModelInvocationError
from debate_core.services import DebateService

from conftest import FakeModelClient, make_history


@pytest.mark.asyncio
async def test_respond_on_new_debate_uses_opening_policy(cache):
    model = FakeModelClient(replies=["**Hmm**, not so fast."])
    debate = DebateService.create(model_client=model, cache=cache, restate_policy=False)

    reply = await debate.respond("Is pineapple a good pizza topping?", [])

    assert reply.text == "Hmm, not so fast."
    assert reply.policy == Policy(stance=Stance.CHALLENGING, depth=Depth.DEEP)
    assert len(model.calls) == 1
    assert model.calls[0][2].temperature == 0.8


@pytest.mark.asyncio
async def test_respond_later_in_debate_classifies_first(cache):
    model = FakeModelClient(replies=["stance: supportive, depth: surface", "Fair enough."])
    debate = DebateService.create(model_client=model, cache=cache, restate_policy=False)

    reply = await debate.respond("I see your point", make_history(3))

    assert reply.policy == Policy(stance=Stance.SUPPORTIVE, depth=Depth.SURFACE)
    assert reply.text == "Fair enough."
    assert len(model.calls) == 2
    assert model.calls[1][0] == "I see your point"


@pytest.mark.asyncio
async def test_open_uses_topic_prompt(cache):
    model = FakeModelClient(replies=["Let's dig in. Why do you think so?"])
    debate = DebateService.create(model_client=model, cache=cache, restate_policy=False)

    reply = await debate.open("Cats are better than dogs")

    assert reply.text == "Let's dig in. Why do you think so?"
    assert '"Cats are better than dogs"' in model.calls[0][0]
    assert reply.policy.stance == Stance.CHALLENGING


@pytest.mark.asyncio
async def test_respond_propagates_model_failure(cache):
    model = FakeModelClient(error=ConnectionError("offline"))
    debate = DebateService.create(model_client=model, cache=cache)

    with pytest.raises(ModelInvocationError):
        await debate.respond("hello", [])


@pytest.mark.asyncio
async def test_classify_never_raises(cache):
    model = FakeModelClient(error=ConnectionError("offline"))
    debate = DebateService.create(model_client=model, cache=cache)

    assert await debate.classify("hello", make_history(4)) == Policy.default()
