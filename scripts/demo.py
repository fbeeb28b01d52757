#!/usr/bin/env python3
"""
Demo script for the debate core.

Runs offline against a scripted model client, showing the opening stance,
output sanitization and the response cache. Pass ``--live`` to use the
model backend configured in the environment instead.
"""

import asyncio
import sys
import time

from debate_core import (
    CacheService,
    ConversationTurn,
    DebateService,
    GenerationParams,
    MemoryCacheRepository,
    ModelTurn,
    Sender,
    clean,
)
from debate_core.api.dependencies import build_model_client


class ScriptedModelClient:
    """Returns canned markdown-heavy replies, one per call."""

    model_name = "scripted-demo"

    def __init__(self) -> None:
        self.calls = 0

    async def invoke(self, prompt: str, history: list[ModelTurn], params: GenerationParams) -> str:
        self.calls += 1
        if prompt.startswith("Analyze the following conversation"):
            return "stance: supportive, depth: expert"
        return (
            f"**Reply {self.calls}:** Interesting point!\n"
            "* Taste is *subjective*\n"
            "1. Sweet and salty can work\n\n\n"
            "## So what do you think?"
        )

    async def is_available(self) -> bool:
        return True


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_sanitizer() -> None:
    """Demonstrate output sanitization."""
    print_section("Text Sanitizer")

    raw = "**Yes** it is!\n1. Great taste\n\n\n2. Versatile"
    print(f"\n  Raw:     {raw!r}")
    print(f"  Cleaned: {clean(raw)!r}")


async def demo_debate(live: bool) -> None:
    """Demonstrate classification, generation and caching."""
    print_section("Debate Turns")

    model_client = build_model_client() if live else ScriptedModelClient()
    cache = CacheService.create(store=MemoryCacheRepository.create())
    debate = DebateService.create(model_client=model_client, cache=cache)

    message = "Is pineapple a good pizza topping?"
    for attempt in ("first call", "repeat call"):
        start = time.time()
        reply = await debate.respond(message, history=[])
        duration = (time.time() - start) * 1000
        print(f"\n  [{attempt}] {duration:.2f}ms")
        print(f"  Policy: {reply.policy.stance.value}/{reply.policy.depth.value}")
        print(f"  Reply: {reply.text[:200]}")

    history = [
        ConversationTurn(Sender.USER, message),
        ConversationTurn(Sender.ASSISTANT, "Plenty of people would disagree."),
        ConversationTurn(Sender.USER, "I think it balances the saltiness."),
    ]
    policy = await debate.classify("Fine, convince me otherwise.", history)
    print(f"\n  Policy after 3 turns: {policy.stance.value}/{policy.depth.value}")

    print(f"\n  Cache stats: {cache.get_stats()}")


def main() -> None:
    live = "--live" in sys.argv[1:]
    demo_sanitizer()
    asyncio.run(demo_debate(live))


if __name__ == "__main__":
    main()
