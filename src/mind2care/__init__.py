"""
mind2care: the chat core of a wellness companion.

Sends a person's text, behind a fixed companion preamble, to a
generative-language model and keeps the exchange in an append-only
conversation log.
"""

__version__ = "0.1.0"

from .chat import (
    ChatDispatcher,
    ConversationLog,
    DispatchOutcome,
    Message,
    Role,
    Sentiment,
    normalize_reply,
)
from .llm import LLMProvider, create_llm_provider

__all__ = [
    "ChatDispatcher",
    "ConversationLog",
    "DispatchOutcome",
    "LLMProvider",
    "Message",
    "Role",
    "Sentiment",
    "create_llm_provider",
    "normalize_reply",
]
