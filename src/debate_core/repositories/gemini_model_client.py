"""Gemini-based model client.

Calls the Gemini ``generateContent`` REST endpoint directly with httpx.
The conversation history is sent as ``contents`` with the ``user`` and
``model`` roles Gemini expects, followed by the new prompt as a final
``user`` turn.

Requirements:
    - A Gemini API key in ``GEMINI_API_KEY``
"""

import logging

import httpx

from debate_core.config import settings
from debate_core.entities import GenerationParams, ModelTurn
from debate_core.exceptions import ModelClientError

logger = logging.getLogger(__name__)


class GeminiModelClient:
    """Gemini implementation of the ModelClient protocol.

    This class satisfies the ModelClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = GeminiModelClient.create(api_key="...")
        text = await client.invoke(
            "Is pineapple a good pizza topping?",
            history=[],
            params=GenerationParams(temperature=0.8),
        )
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Gemini model client.

        Args:
            api_key: Gemini API key. Defaults to settings.gemini_api_key.
            model_name: Model identifier. Defaults to settings.gemini_model.
            base_url: API base URL. Defaults to settings.gemini_base_url.
            timeout: Request timeout in seconds. Defaults to settings.model_timeout.
            http_client: Pre-built client (tests inject one with a mock transport).
        """
        self._api_key = api_key or settings.gemini_api_key
        self._model_name = model_name or settings.gemini_model
        self._base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self._timeout = timeout or settings.model_timeout
        self._client = http_client

        if not self._api_key:
            logger.error("GEMINI_API_KEY is not defined in environment variables")

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        model_name: str | None = None,
    ) -> "GeminiModelClient":
        """Factory method to create GeminiModelClient with defaults.

        Args:
            api_key: API key. If None, uses settings.
            model_name: Model name. If None, uses settings.

        Returns:
            Configured GeminiModelClient
        """
        return cls(api_key=api_key, model_name=model_name)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
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
        """Build the ``generateContent`` request body."""
        contents = [{"role": turn.role, "parts": [{"text": turn.text}]} for turn in history]
        contents.append({"role": "user", "parts": [{"text": prompt}]})

        generation_config: dict = {
            "temperature": params.temperature,
            "maxOutputTokens": params.max_output_tokens,
        }
        if params.top_k is not None:
            generation_config["topK"] = params.top_k
        if params.top_p is not None:
            generation_config["topP"] = params.top_p

        return {"contents": contents, "generationConfig": generation_config}

    async def invoke(
        self,
        prompt: str,
        history: list[ModelTurn],
        params: GenerationParams,
    ) -> str:
        """Generate a reply with Gemini.

        Raises:
            ModelClientError: If the request fails or the reply has no text
        """
        url = f"{self._base_url}/models/{self._model_name}:generateContent"
        payload = self.build_payload(prompt, history, params)

        try:
            response = await self.client.post(
                url,
                json=payload,
                headers={"x-goog-api-key": self._api_key or ""},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise ModelClientError(f"Gemini API error: {e}") from e

        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise ModelClientError(f"Unexpected response format: {data}") from e

        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise ModelClientError("Gemini returned an empty reply")
        return text

    async def is_available(self) -> bool:
        """Check that the model endpoint answers for this key."""
        try:
            response = await self.client.get(
                f"{self._base_url}/models/{self._model_name}",
                headers={"x-goog-api-key": self._api_key or ""},
            )
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
