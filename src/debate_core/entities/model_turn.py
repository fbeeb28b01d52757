"""Model-facing value types."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ModelTurn:
    """A history turn in the model's own format.

    Attributes:
        role: ``"user"`` for user turns, ``"model"`` for assistant turns
        text: The turn content
    """

    role: Literal["user", "model"]
    text: str


@dataclass(frozen=True)
class GenerationParams:
    """Sampling parameters for one model call."""

    temperature: float = 0.7
    top_k: int | None = None
    top_p: float | None = None
    max_output_tokens: int = 800
