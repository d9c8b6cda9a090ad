"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Stage-lit palette: velvet background, gold spotlight, rose accents
SPOTLIGHT = Theme(
    name="encore-spotlight",
    primary="#f5c2e7",      # Rose - main accent
    secondary="#cba6f7",    # Mauve - assistant messages
    accent="#f9e2af",       # Gold - highlights
    foreground="#cdd6f4",
    background="#14101c",
    success="#a6e3a1",
    warning="#fab387",
    error="#f38ba8",
    surface="#1f1a2b",
    panel="#191424",
    dark=True,
    variables={
        "block-cursor-foreground": "#14101c",
        "block-cursor-background": "#f5e0dc",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#cdd6f4",
        "input-cursor-foreground": "#14101c",
        "input-selection-background": "#f5c2e7 30%",

        "border": "#4a4159",
        "border-blurred": "#332c40",

        "scrollbar": "#332c40",
        "scrollbar-hover": "#4a4159",
        "scrollbar-active": "#f5c2e7",
        "scrollbar-background": "#191424",
        "scrollbar-corner-color": "#191424",

        "footer-foreground": "#bac2de",
        "footer-background": "#14101c",
        "footer-key-foreground": "#f9e2af",
        "footer-key-background": "#332c40",

        "text-muted": "#6c7086",
        "text-disabled": "#4a4159",
    },
)
