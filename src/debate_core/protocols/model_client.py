"""Generative model client protocol.

The model backend is opaque: given a prompt and optional history it
returns free-form text or fails. One request, one response, no streaming.

Implementations can include:
- Gemini generateContent REST API (default)
- Ollama chat API
- Test doubles
"""

from typing import Protocol, runtime_checkable

from debate_core.entities import GenerationParams, ModelTurn


@runtime_checkable
class ModelClient(Protocol):
    """Protocol for text-generation backends."""

    @property
    def model_name(self) -> str:
        """Return the name/identifier of the model."""
        ...

    async def invoke(
        self,
        prompt: str,
        history: list[ModelTurn],
        params: GenerationParams,
    ) -> str:
        """Generate a reply to ``prompt`` following ``history``.

        Args:
            prompt: The new user-side message
            history: Earlier turns, oldest first (may be empty)
            params: Sampling parameters

        Returns:
            The raw generated text

        Raises:
            Exception: Any transport, quota or response-shape failure
        """
        ...

    async def is_available(self) -> bool:
        """Check if the backend is reachable."""
        ...
