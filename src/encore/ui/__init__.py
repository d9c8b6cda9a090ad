"""Terminal UI module for encore.

Provides a Textual-based TUI for chatting through the proxy.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (input bar, pending indicator, transcript, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- config.py: Log levels and display constants
- app.py: Application orchestration (user interaction flow)
"""

from .app import EncoreApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, PendingIndicator

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "EncoreApp",
    "LogLevel",
    "PendingIndicator",
    "run_textual_tui",
]
