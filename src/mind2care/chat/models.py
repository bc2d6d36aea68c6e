"""Data models for the chat conversation.

Messages are frozen once built; the conversation log only ever gains new
ones.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Sentiment(str, Enum):
    """Static tone tag attached to a message."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


def _new_message_id() -> str:
    return f"msg-{uuid4().hex}"


class Message(BaseModel):
    """One turn in a conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_message_id)
    role: Role
    content: str
    sentiment: Sentiment | None = Field(
        default=None,
        description="Placeholder tone tag; never computed from the content"
    )
    tokens: int | None = Field(
        default=None,
        ge=0,
        description="Character length of an assistant reply, used as a size hint"
    )
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content, sentiment=Sentiment.NEUTRAL)

    @classmethod
    def reply(cls, content: str) -> "Message":
        return cls(
            role=Role.ASSISTANT,
            content=content,
            sentiment=Sentiment.POSITIVE,
            tokens=len(content),
        )

    @classmethod
    def fallback(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content, sentiment=Sentiment.NEGATIVE)


class DispatchOutcome(BaseModel):
    """What a single dispatch appended to the log."""

    model_config = ConfigDict(frozen=True)

    user_message: Message
    assistant_message: Message
    ok: bool = Field(description="False when the fallback reply was recorded")
