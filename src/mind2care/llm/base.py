from abc import ABC, abstractmethod
from typing import Any

from .models import LLMResponse


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which text-generation service
    answers the companion's prompts. Implementations must handle:
    - API client setup and authentication
    - Request/response format conversion
    - Translating provider failures into mind2care.llm.errors types

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.generate(prompt)
        # Automatically cleaned up
    """

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        model: str | None = None,
    ) -> LLMResponse:
        """Generate a reply to a single-turn prompt.

        Args:
            prompt: Complete prompt text, sent as one user turn
            model: Model to use (None uses provider's default)

        Returns:
            LLMResponse containing the first candidate's text

        Raises:
            TransportError: The request failed or returned a non-2xx status
            PayloadError: The response had no usable candidate text
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            # Suppress harmless cleanup errors from httpx/anyio
            if "Event loop is closed" not in str(e):
                raise
