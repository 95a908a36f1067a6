"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, links)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Slate surfaces with blue for the candidate and emerald for the interviewer
SLATE_STUDY = Theme(
    name="slate-study",
    primary="#3b82f6",      # Blue 500 - user turns, focus
    secondary="#10b981",    # Emerald 500 - interviewer turns
    accent="#f59e0b",       # Amber 500 - highlights
    foreground="#e2e8f0",   # Slate 200
    background="#020617",   # Slate 950
    success="#22c55e",
    warning="#f59e0b",
    error="#ef4444",
    surface="#0f172a",      # Slate 900
    panel="#1e293b",        # Slate 800
    dark=True,
    variables={
        "block-cursor-foreground": "#020617",
        "block-cursor-background": "#93c5fd",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#334155 30%",

        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#020617",
        "input-selection-background": "#3b82f6 30%",

        "border": "#334155",
        "border-blurred": "#1e293b",

        "scrollbar": "#334155",
        "scrollbar-hover": "#475569",
        "scrollbar-active": "#3b82f6",
        "scrollbar-background": "#0f172a",
        "scrollbar-corner-color": "#0f172a",

        "footer-foreground": "#cbd5e1",
        "footer-background": "#020617",
        "footer-key-foreground": "#fbbf24",
        "footer-key-background": "#1e293b",
        "footer-description-foreground": "#94a3b8",

        "text-muted": "#64748b",
        "text-disabled": "#334155",

        "link-color": "#60a5fa",
        "link-style": "underline",
        "link-background-hover": "#3b82f6 15%",
        "link-color-hover": "#93c5fd",
        "link-style-hover": "bold",
    },
)
