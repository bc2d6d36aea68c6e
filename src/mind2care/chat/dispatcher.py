"""Chat request dispatcher.

Turns one piece of user text into one request to the text-generation
service and records the outcome in the conversation log.

Hidden design decisions:
- How the instruction preamble and the user's text are combined
- How replies are cleaned up before storage
- That every failure collapses into one fallback reply
"""

import logging

from ..llm import LLMError, LLMProvider
from ..prompts import compose_prompt, get_companion_prompt
from .config import FALLBACK_REPLY
from .log import ConversationLog
from .models import DispatchOutcome, Message
from .normalize import normalize_reply

logger = logging.getLogger(__name__)


class ChatDispatcher:
    """Sends chat turns to an LLM provider and records them.

    Dispatches are not serialized. The user message of each call is
    appended before its request is issued, so user messages keep call
    order; assistant messages land in the order their requests settle.

    Usage:
        log = ConversationLog()
        dispatcher = ChatDispatcher(provider, log)
        outcome = await dispatcher.dispatch("I'm feeling anxious")
        print(outcome.assistant_message.content)
    """

    def __init__(
        self,
        provider: LLMProvider,
        log: ConversationLog,
        preamble: str | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            provider: Provider that generates the replies
            log: Conversation log to append to
            preamble: Instruction text placed before every user turn
                (None loads the packaged companion prompt)
        """
        self._provider = provider
        self._log = log
        self._preamble = preamble if preamble is not None else get_companion_prompt()
        self._pending = 0

    @property
    def pending(self) -> int:
        """Number of dispatches still waiting on the provider."""
        return self._pending

    async def dispatch(self, user_text: str) -> DispatchOutcome:
        """Send one chat turn and record the user message and the reply.

        The caller must ensure user_text is non-empty after trimming.
        Never raises for provider failures: they are recorded as the
        fallback reply and reported with ok=False.

        Args:
            user_text: Text exactly as the user entered it

        Returns:
            DispatchOutcome holding both appended messages
        """
        user_message = self._log.append(Message.user(user_text))
        prompt = compose_prompt(user_text, self._preamble)

        self._pending += 1
        logger.debug("Dispatch %s started", user_message.id)
        try:
            response = await self._provider.generate(prompt)
            reply = normalize_reply(response.content)
        except LLMError as e:
            logger.warning("Dispatch %s failed (%s): %s", user_message.id, type(e).__name__, e)
            assistant_message = Message.fallback(FALLBACK_REPLY)
            ok = False
        except Exception as e:
            logger.warning(
                "Dispatch %s failed with unexpected %s: %s",
                user_message.id, type(e).__name__, e,
                exc_info=True
            )
            assistant_message = Message.fallback(FALLBACK_REPLY)
            ok = False
        else:
            assistant_message = Message.reply(reply)
            ok = True
        finally:
            self._pending -= 1

        self._log.append(assistant_message)
        logger.debug("Dispatch %s settled (ok=%s)", user_message.id, ok)

        return DispatchOutcome(
            user_message=user_message,
            assistant_message=assistant_message,
            ok=ok,
        )
