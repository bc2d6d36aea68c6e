"""In-memory conversation log.

Holds the ordered messages of one chat session. Data is lost when the
application exits.
"""

from collections.abc import Iterator
from datetime import datetime
from uuid import uuid4

from .models import Message


class ConversationLog:
    """Append-only sequence of messages for one session.

    append() is the only way to add a message and clear() the only way to
    remove them, all at once. Readers get tuple snapshots.
    """

    def __init__(self, session_id: str | None = None):
        self._session_id = session_id or str(uuid4())
        self._messages: list[Message] = []
        self._created_at = datetime.now()

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def append(self, message: Message) -> Message:
        """Add a message to the end of the log.

        Args:
            message: The message to record

        Returns:
            The same message, for chaining
        """
        self._messages.append(message)
        return message

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of all messages, oldest first."""
        return tuple(self._messages)

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    @property
    def message_count(self) -> int:
        return len(self._messages)

    @property
    def tokens_used(self) -> int:
        """Sum of the size hints of all messages (missing hints count as 0)."""
        return sum(message.tokens or 0 for message in self._messages)

    def clear(self) -> None:
        """Drop every message in the session."""
        self._messages = []

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)
