"""Main Textual TUI application.

Orchestrates the UI components and wires them to the ChatSession:
session mutations re-render the transcript, busy changes lock the input
and drive the pending indicator, failed exchanges raise a toast.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Footer, Header, Static
from textual.worker import Worker

from ..session import GREETING, PENDING_PHRASE_INTERVAL, ChatSession, ChatTransport, Message
from .config import INPUT_PLACEHOLDER, PERSONA_TIP, LogLevel
from .styles import APP_CSS
from .themes import SPOTLIGHT
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, PendingIndicator


class EncoreApp(App):
    """Textual TUI for the Encore chat."""

    CSS = APP_CSS
    TITLE = "Encore"
    SUB_TITLE = "A Broadway heart, securely proxied"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
    ]

    def __init__(
        self,
        transport: ChatTransport,
        log_level: str | None = None,
        greeting: str = GREETING,
    ) -> None:
        super().__init__()
        self._transport = transport
        self._log_level = log_level
        self._session = ChatSession(
            transport,
            greeting=greeting,
            on_change=self._on_session_message,
            on_busy_change=self._on_busy_change,
            on_error=self._on_exchange_error,
        )
        self._pending_timer: Timer | None = None
        self._exchange_worker: Worker | None = None

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield PendingIndicator(id="pending")
        yield DebugPanel(id="debug-panel")
        with Vertical(id="bottom-bar"):
            yield ChatInputBar(id="chat-input-bar", placeholder=INPUT_PLACEHOLDER)
            yield Static(PERSONA_TIP, id="persona-tip")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(SPOTLIGHT)
        self.theme = "encore-spotlight"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route session messages to the log panel."""
            if level == "debug":
                log_panel.debug(component, message)
            elif level == "info":
                log_panel.info(component, message)
            elif level == "warning":
                log_panel.warning(component, message)
            elif level == "error":
                log_panel.error(component, message)

        self._session.set_debug_callback(debug_callback)

        self._pending_timer = self.set_interval(
            PENDING_PHRASE_INTERVAL, self._tick_pending, pause=True
        )

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        for message in self._session.messages:
            chat.add_message(message)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _on_session_message(self, message: Message) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).add_message(message)

    def _on_busy_change(self, busy: bool) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(busy)
        indicator = self.query_one("#pending", PendingIndicator)
        if busy:
            indicator.show_phrase(self._session.pending_phrase)
            if self._pending_timer is not None:
                self._pending_timer.reset()
                self._pending_timer.resume()
        else:
            if self._pending_timer is not None:
                self._pending_timer.pause()
            indicator.hide()

    def _on_exchange_error(self, title: str, description: str) -> None:
        self.notify(description, title=title, severity="error", timeout=5)

    def _tick_pending(self) -> None:
        if self._session.busy:
            phrase = self._session.advance_pending()
            self.query_one("#pending", PendingIndicator).show_phrase(phrase)

    def _exchange_in_flight(self) -> bool:
        return self._exchange_worker is not None and not self._exchange_worker.is_finished

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        event.stop()
        if self._exchange_in_flight() or not self._session.can_submit(event.value):
            return
        self.query_one("#chat-input-bar", ChatInputBar).accept()
        self._exchange_worker = self._exchange(event.value)

    @work(group="exchange", exit_on_error=False)
    async def _exchange(self, text: str) -> None:
        """Run one exchange with the proxy as a background async worker."""
        await self._session.submit(text)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(transport: ChatTransport, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        transport: Transport to the proxy endpoint
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = EncoreApp(transport=transport, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await transport.close()
