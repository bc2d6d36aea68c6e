"""Chat module for mind2care.

Dispatches chat turns to the companion model and keeps the session's
append-only conversation log.
"""

from .config import FALLBACK_REPLY, MAX_INPUT_CHARS, QUICK_REPLIES
from .dispatcher import ChatDispatcher
from .log import ConversationLog
from .models import DispatchOutcome, Message, Role, Sentiment
from .normalize import normalize_reply

__all__ = [
    "ChatDispatcher",
    "ConversationLog",
    "DispatchOutcome",
    "FALLBACK_REPLY",
    "MAX_INPUT_CHARS",
    "Message",
    "QUICK_REPLIES",
    "Role",
    "Sentiment",
    "normalize_reply",
]
