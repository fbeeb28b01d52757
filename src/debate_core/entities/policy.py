"""Stance/depth policy domain entity."""

from dataclasses import dataclass
from enum import Enum


class Stance(str, Enum):
    """Rhetorical posture the assistant adopts."""

    SUPPORTIVE = "supportive"
    CHALLENGING = "challenging"
    NEUTRAL = "neutral"


class Depth(str, Enum):
    """Explanation sophistication level."""

    SURFACE = "surface"
    DEEP = "deep"
    EXPERT = "expert"


@dataclass(frozen=True)
class Policy:
    """The (stance, depth) pair governing one generated turn.

    Both fields are always populated; use ``Policy.default()`` whenever a
    decision cannot be made.
    """

    stance: Stance = Stance.NEUTRAL
    depth: Depth = Depth.DEEP

    @classmethod
    def default(cls) -> "Policy":
        """The fallback policy: neutral stance, deep explanations."""
        return cls(stance=Stance.NEUTRAL, depth=Depth.DEEP)

    @classmethod
    def opening(cls) -> "Policy":
        """The policy used while a debate is still opening."""
        return cls(stance=Stance.CHALLENGING, depth=Depth.DEEP)

    def to_dict(self) -> dict[str, str]:
        """Plain form used as the cached value."""
        return {"stance": self.stance.value, "depth": self.depth.value}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "Policy":
        """Rebuild a policy from its cached form."""
        return cls(stance=Stance(data["stance"]), depth=Depth(data["depth"]))
