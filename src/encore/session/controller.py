"""Chat session controller.

Owns the conversation and the session UI state (draft input, busy flag,
pending phrase index) and mediates every exchange with the proxy.

Runs on a single asyncio event loop: the busy flag is checked and set
before the first await in submit(), so a second submission that arrives
while a reply is pending sees busy=True and is ignored.
"""

from collections.abc import Callable

from .client import ChatTransport
from .config import FAILURE_DESCRIPTION, FAILURE_TITLE, GREETING, PENDING_PHRASES
from .models import Message

# (level, component, message), level in {"debug", "info", "warning", "error"}
DebugCallback = Callable[[str, str, str], None]
# (title, description)
NotifyCallback = Callable[[str, str], None]


class ChatSession:
    """In-memory conversation with at most one in-flight exchange.

    Observers:
        on_change: called after every conversation mutation
        on_busy_change: called with the new busy value whenever it flips
        on_error: called with (title, description) when an exchange fails

    Example:
        session = ChatSession(ProxyClient(ClientSettings.from_env()))
        await session.submit("Help me plan my audition")
    """

    def __init__(
        self,
        transport: ChatTransport,
        greeting: str = GREETING,
        on_change: Callable[[Message], None] | None = None,
        on_busy_change: Callable[[bool], None] | None = None,
        on_error: NotifyCallback | None = None,
    ) -> None:
        self._transport = transport
        self._messages: list[Message] = [Message(role="assistant", content=greeting)]
        self._busy = False
        self._pending_index = 0
        self.draft = ""
        self._on_change = on_change
        self._on_busy_change = on_busy_change
        self._on_error = on_error
        self._debug_callback: DebugCallback | None = None

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Route session tracing to a log sink."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Session", message)

    @property
    def messages(self) -> tuple[Message, ...]:
        """The conversation, oldest first."""
        return tuple(self._messages)

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def pending_phrase(self) -> str:
        """Placeholder text to show while a reply is pending."""
        return PENDING_PHRASES[self._pending_index]

    def can_submit(self, text: str | None = None) -> bool:
        """Whether submit() would send: non-empty trimmed text and not busy."""
        value = self.draft if text is None else text
        return bool(value.strip()) and not self._busy

    def advance_pending(self) -> str:
        """Rotate to the next pending phrase. No-op while idle."""
        if self._busy:
            self._pending_index = (self._pending_index + 1) % len(PENDING_PHRASES)
        return self.pending_phrase

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        if self._on_change is not None:
            self._on_change(message)

    def _set_busy(self, busy: bool) -> None:
        if busy == self._busy:
            return
        self._busy = busy
        if not busy:
            self._pending_index = 0
        if self._on_busy_change is not None:
            self._on_busy_change(busy)

    async def submit(self, text: str | None = None) -> bool:
        """Send a user message and append the assistant's reply.

        Args:
            text: Message text (default: the current draft)

        Returns:
            True if an assistant reply was appended. False if the submission
            was ignored (empty input or busy) or the exchange failed.
        """
        value = self.draft if text is None else text
        if not self.can_submit(value):
            self._debug("debug", "Ignored submission (empty input or busy)")
            return False

        self._append(Message(role="user", content=value.strip()))
        self.draft = ""
        self._set_busy(True)
        self._debug("info", f"Sending {len(self._messages)} message(s) to proxy")

        try:
            reply = await self._transport.send(self.messages)
        except Exception as e:
            self._debug("error", f"Exchange failed: {e}")
            if self._on_error is not None:
                self._on_error(FAILURE_TITLE, FAILURE_DESCRIPTION)
            return False
        else:
            self._append(Message(role="assistant", content=reply))
            self._debug("info", f"Reply received: {len(reply)} chars")
            return True
        finally:
            self._set_busy(False)
