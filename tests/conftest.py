"""Pytest configuration and shared fixtures."""
import os
from collections.abc import Awaitable, Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest
from google.genai import types

from mind2care.llm import LLMProvider, LLMResponse

Handler = Callable[[str], Awaitable[str]]


class FakeProvider(LLMProvider):
    """Provider that answers through an async handler instead of the network."""

    def __init__(self, handler: Handler | None = None):
        self._handler = handler or self._echo
        self.prompts: list[str] = []
        self.closed = False

    @staticmethod
    async def _echo(prompt: str) -> str:
        return "I hear you."

    async def generate(self, prompt: str, model: str | None = None) -> LLMResponse:
        self.prompts.append(prompt)
        content = await self._handler(prompt)
        return LLMResponse(content=content, model=model or "fake-model")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture(scope="session")
def make_provider():
    """Return a factory for FakeProvider instances.

    Session-scoped so property tests can build a fresh provider per example.
    """
    return FakeProvider


@pytest.fixture(scope="session")
def replying():
    """Return a factory for handlers that always answer with the given text."""
    def build(text: str) -> Handler:
        async def handler(prompt: str) -> str:
            return text
        return handler
    return build


@pytest.fixture(scope="session")
def failing():
    """Return a factory for handlers that always raise the given error."""
    def build(error: Exception) -> Handler:
        async def handler(prompt: str) -> str:
            raise error
        return handler
    return build


@pytest.fixture(scope="session")
def gemini_response():
    """Return a builder that turns a raw JSON payload into an SDK response."""
    def build(payload: dict[str, Any]) -> types.GenerateContentResponse:
        return types.GenerateContentResponse.model_validate(payload)
    return build


@pytest.fixture(scope="session")
def genai_client():
    """Return a builder for stand-ins of genai.Client.

    The stand-in exposes only aio.models.generate_content, an AsyncMock that
    returns result or raises error.
    """
    def build(result: Any = None, error: Exception | None = None) -> SimpleNamespace:
        generate = AsyncMock(return_value=result, side_effect=error)
        return SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate)))
    return build


@pytest.fixture
def fake_provider(make_provider):
    """Provider that always replies 'I hear you.'."""
    return make_provider()


@pytest.fixture
def preamble():
    """Short preamble so prompts are easy to assert on."""
    return "Be kind. "


@pytest.fixture
def anxious_payload():
    """Gemini payload whose reply has a run of blank lines."""
    return {
        "candidates": [
            {"content": {"parts": [{"text": "Take a breath.\n\n\n\nYou are safe."}]}}
        ]
    }


@pytest.fixture
def client_calls(monkeypatch):
    """Record the keyword arguments genai.Client is built with."""
    calls = []

    def record(**kwargs):
        calls.append(kwargs)
        return object()

    monkeypatch.setattr("mind2care.llm.providers.gemini.genai.Client", record)
    return calls
