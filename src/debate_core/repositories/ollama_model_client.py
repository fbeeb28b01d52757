"""Ollama-based model client.

Uses Ollama's local ``/api/chat`` endpoint with streaming disabled.
Ollama names the assistant role ``assistant``, so ``model`` turns are
renamed on the way out.

Requirements:
    - Ollama installed: https://ollama.com
    - Model pulled: `ollama pull llama3.1`
    - Ollama running: `ollama serve` (usually runs automatically)
"""

import httpx

from debate_core.config import settings
from debate_core.entities import GenerationParams, ModelTurn
from debate_core.exceptions import ModelClientError


class OllamaModelClient:
    """Ollama implementation of the ModelClient protocol.

    This class satisfies the ModelClient protocol through structural
    typing - no explicit inheritance needed.
    """

    ROLE_NAMES = {"user": "user", "model": "assistant"}

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Ollama model client.

        Args:
            model_name: Name of the Ollama model. Defaults to settings.ollama_model.
            base_url: Ollama API base URL. Defaults to settings.ollama_base_url.
            timeout: Request timeout in seconds. Defaults to settings.model_timeout.
            http_client: Pre-built client (tests inject one with a mock transport).
        """
        self._model_name = model_name or settings.ollama_model
        self._base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self._timeout = timeout or settings.model_timeout
        self._client = http_client

    @classmethod
    def create(
        cls,
        model_name: str | None = None,
        base_url: str | None = None,
    ) -> "OllamaModelClient":
        """Factory method to create OllamaModelClient with defaults.

        Args:
            model_name: Model name. If None, uses settings.
            base_url: Ollama API URL. If None, uses settings.

        Returns:
            Configured OllamaModelClient
        """
        return cls(model_name=model_name, base_url=base_url)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @property
    def model_name(self) -> str:
        """Get the model name/identifier."""
        return self._model_name

    def build_payload(
        self,
        prompt: str,
        history: list[ModelTurn],
        params: GenerationParams,
    ) -> dict:
        """Build the ``/api/chat`` request body."""
        messages = [
            {"role": self.ROLE_NAMES[turn.role], "content": turn.text} for turn in history
        ]
        messages.append({"role": "user", "content": prompt})

        options: dict = {
            "temperature": params.temperature,
            "num_predict": params.max_output_tokens,
        }
        if params.top_k is not None:
            options["top_k"] = params.top_k
        if params.top_p is not None:
            options["top_p"] = params.top_p

        return {
            "model": self._model_name,
            "messages": messages,
            "stream": False,
            "options": options,
        }

    async def invoke(
        self,
        prompt: str,
        history: list[ModelTurn],
        params: GenerationParams,
    ) -> str:
        """Generate a reply with Ollama.

        Raises:
            ModelClientError: If the request fails or the reply has no text
        """
        url = f"{self._base_url}/api/chat"
        payload = self.build_payload(prompt, history, params)

        try:
            response = await self.client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            error_msg = f"Ollama API error: {e}"
            if "connection refused" in str(e).lower():
                error_msg += "\n  → Is Ollama running? Try: ollama serve"
            raise ModelClientError(error_msg) from e

        content = (data.get("message") or {}).get("content")
        if not content:
            raise ModelClientError(f"Unexpected response format: {data}")
        return content

    async def is_available(self) -> bool:
        """Check if Ollama is running.

        Returns:
            True if the tags endpoint answers, False otherwise
        """
        try:
            response = await self.client.get(f"{self._base_url}/api/tags")
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
