"""Google Gemini LLM provider implementation.

Uses the official Google GenAI SDK for async single-turn generation.
Reference: https://github.com/googleapis/python-genai

Note: Gemini can return an empty candidate list when safety filtering
blocks a reply. That surfaces as PayloadError; nothing is retried.
"""

import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ..base import LLMProvider
from ..errors import PayloadError, TransportError
from ..models import LLMResponse

DEFAULT_MODEL = "gemini-2.0-flash"

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider implementation.

    Hidden design decisions:
    - Google GenAI client initialization
    - Request shape: one user content carrying one text part, no
      generation config
    - Which part of the response counts as the reply
    - Mapping SDK exceptions onto TransportError / PayloadError
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: int | None = None,
        client: genai.Client | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default model (gemini-2.0-flash, gemini-2.5-flash, ...)
            timeout: Transport timeout in milliseconds (None keeps the SDK default)
            client: Pre-built client, mostly for tests
            **client_kwargs: Additional kwargs for Client
        """
        self._model = model
        if client is None:
            if timeout is not None:
                client_kwargs.setdefault("http_options", types.HttpOptions(timeout=timeout))
            client = genai.Client(api_key=api_key, **client_kwargs)
        self._client = client

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    def _build_contents(self, prompt: str) -> list[types.Content]:
        return [types.Content(role="user", parts=[types.Part(text=prompt)])]

    def _extract_content(self, response: types.GenerateContentResponse) -> str:
        """Extract the first candidate's first text part.

        Args:
            response: Gemini GenerateContentResponse

        Returns:
            Text of candidates[0].content.parts[0]

        Raises:
            PayloadError: If any step of that path is missing
        """
        if not response.candidates:
            raise PayloadError("Response contained no candidates")

        candidate = response.candidates[0]
        if candidate.content is None or not candidate.content.parts:
            reason = candidate.finish_reason or "unknown"
            raise PayloadError(f"First candidate has no content parts (finish reason: {reason})")

        text = candidate.content.parts[0].text
        if text is None:
            raise PayloadError("First content part carries no text")
        return text

    async def generate(
        self,
        prompt: str,
        model: str | None = None,
    ) -> LLMResponse:
        """Generate a reply using Google Gemini.

        Args:
            prompt: Complete prompt text
            model: Model to use (overrides default)

        Returns:
            LLMResponse with the first candidate's text
        """
        model_to_use = model or self._model
        logger.debug("Requesting %s (%d prompt chars)", model_to_use, len(prompt))

        try:
            response = await self._client.aio.models.generate_content(
                model=model_to_use,
                contents=self._build_contents(prompt),
            )
        except errors.APIError as e:
            raise TransportError(f"Gemini returned {e.code}: {e.message}", status_code=e.code) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Gemini request failed: {e}") from e

        return LLMResponse(
            content=self._extract_content(response),
            model=model_to_use
        )

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
