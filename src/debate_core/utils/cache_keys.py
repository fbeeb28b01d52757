"""Deterministic cache fingerprints.

Keys are plain joined strings, not hashes: readable in logs and in Redis,
equal for equal ordered inputs. Distinct inputs are not guaranteed to be
collision-free, but changing any single part always changes the key.
"""

import json
from collections.abc import Sequence
from enum import Enum
from typing import Any

from debate_core.entities import ConversationTurn

KEY_SEPARATOR = ":"
HISTORY_SEPARATOR = "|"
TURN_PREVIEW_CHARS = 100


def normalize_part(part: Any) -> str:
    """Render one key part in its canonical string form."""
    if isinstance(part, str):
        return part
    if isinstance(part, Enum):
        return str(part.value)
    if isinstance(part, (dict, list, tuple)):
        return json.dumps(part, sort_keys=True, default=str, ensure_ascii=False)
    return str(part)


def derive(purpose: str, *parts: Any) -> str:
    """Build the cache key for ``purpose`` from ordered request parts.

    Args:
        purpose: Namespace tag, e.g. ``"response"`` or ``"sentiment"``
        *parts: Request parts; non-string parts are normalized first

    Returns:
        The cache key

    Example:
        ```python
        derive("response", "hello", Stance.CHALLENGING)
        # 'response:hello:challenging'
        ```
    """
    return KEY_SEPARATOR.join([purpose, *(normalize_part(p) for p in parts)])


def compact_history(
    history: Sequence[ConversationTurn],
    last: int | None = None,
) -> str:
    """Contract a history into its fingerprint form.

    Each turn becomes ``sender:first-100-chars`` (separators in the text
    escaped) and turns are joined by ``|``, so two different histories
    never compact to the same string.

    Args:
        history: Turns, oldest first
        last: Only use the last ``last`` turns (all turns when None)

    Returns:
        The compact history string
    """
    turns = list(history)
    if last is not None:
        turns = turns[-last:] if last > 0 else []
    return HISTORY_SEPARATOR.join(turn.compact(TURN_PREVIEW_CHARS) for turn in turns)
