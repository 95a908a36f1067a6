"""Terminal UI module for prepmate.

Provides a Textual-based TUI over the PrepController.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (chat bubbles, input bar, snippet cards, log panel)
- views.py: One view per mode (knowledge base, planner, interview)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- formatting.py: Rich markup for notes, sources and headers
- callbacks.py: How the TUI receives message states and debug events
- app.py: Application orchestration (user interaction flow)
"""

from .app import PrepMateApp, run_textual_tui
from .callbacks import ChatViewCallback, DebugLogCallback
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageBubble

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChatViewCallback",
    "DebugLogCallback",
    "DebugPanel",
    "LogLevel",
    "MessageBubble",
    "PrepMateApp",
    "run_textual_tui",
]
