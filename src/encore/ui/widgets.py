"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Send-button enablement
- Pending indicator display
- Log rendering and level filtering
- Chat message rendering and scrolling
"""

from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message as TextualMessage
from textual.widgets import Button, RichLog, Static, TextArea

from ..session import Message
from .config import (
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    LogLevel,
)


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button.

    The Send button is disabled while busy or while the trimmed input is
    empty. The text area is disabled while busy.
    """

    class Submitted(TextualMessage):
        """Message sent when user asks to send the current input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, placeholder: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._placeholder = placeholder
        self._busy = False

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        if self._placeholder:
            text_area.placeholder = self._placeholder
        yield text_area
        yield Button("Send", id="send-btn", variant="success", disabled=True).with_tooltip(
            "Send message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", TextArea).text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_send()

    def on_key(self, event) -> None:
        """Handle the submit shortcut.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()

    def _refresh_send(self) -> None:
        button = self.query_one("#send-btn", Button)
        button.disabled = self._busy or not self.value.strip()

    def _submit(self) -> None:
        if self._busy:
            return
        self.post_message(self.Submitted(self.value))

    def accept(self) -> None:
        """Clear the input once it has been submitted."""
        self.query_one("#chat-input", TextArea).text = ""
        self._refresh_send()

    def set_busy(self, busy: bool) -> None:
        """Lock or unlock the input while a reply is pending."""
        self._busy = busy
        text_area = self.query_one("#chat-input", TextArea)
        text_area.disabled = busy
        button = self.query_one("#send-btn", Button)
        button.label = "Sending..." if busy else "Send"
        self._refresh_send()
        if not busy:
            text_area.focus()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class PendingIndicator(Static):
    """One-line "waiting" indicator shown only while a reply is pending."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.phrase = ""
        self.display = False

    def show_phrase(self, phrase: str) -> None:
        self.phrase = phrase
        self.update(f"* {phrase}")
        self.display = True

    def hide(self) -> None:
        self.phrase = ""
        self.update("")
        self.display = False


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        # Hidden by default
        self.display = False

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def write_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, ...)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors.get(level, "white")
        level_name = LogLevel.name(level)

        component_colors = {
            "TUI": "cyan",
            "Session": "bright_magenta",
        }
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] {message}"
        )

    def debug(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat transcript that always follows the newest message."""

    BORDER_TITLE = "Stage"
    BORDER_SUBTITLE = "Conversation"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []

    def on_mount(self) -> None:
        # Stay pinned to the bottom while messages grow the transcript
        self.anchor()

    @property
    def message_count(self) -> int:
        return len(self._messages)

    def add_message(self, msg: Message) -> None:
        """Render a message and scroll to it."""
        self._messages.append(msg)
        self._render_message(msg)
        self.border_subtitle = f"{len(self._messages)} messages"
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last assistant response."""
        for msg in reversed(self._messages):
            if msg.role == "assistant":
                return msg.content
        return None

    def _render_message(self, msg: Message) -> None:
        if msg.role == "user":
            header_text = "You"
            border_class = "user-message"
        else:
            header_text = "Encore"
            border_class = "assistant-message"

        timestamp = msg.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        container = Vertical(classes=f"chat-message {border_class}")
        container.compose_add_child(
            Static(f"{header_text} [{timestamp}]", classes="message-header", markup=False)
        )
        container.compose_add_child(Static(msg.content, classes="message-content", markup=False))

        self.mount(container)
