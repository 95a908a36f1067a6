"""Callback interface between the core components and the TUI.

Hides the details of how the TUI receives updates:
- published chat message states go to the interview view
- debug messages go to the log panel
"""

from typing import TYPE_CHECKING

from ..chat import ChatMessage

if TYPE_CHECKING:
    from .views import InterviewView
    from .widgets import DebugPanel


class ChatViewCallback:
    """Renders every published message state in the interview view."""

    def __init__(self, view: "InterviewView") -> None:
        self.view = view

    def __call__(self, message: ChatMessage) -> None:
        self.view.upsert_message(message)


class DebugLogCallback:
    """Routes (level, component, message) debug events to the log panel."""

    def __init__(self, panel: "DebugPanel") -> None:
        self.panel = panel

    def __call__(self, level: str, component: str, message: str) -> None:
        if level == "debug":
            self.panel.debug(component, message)
        elif level == "info":
            self.panel.info(component, message)
        elif level == "warning":
            self.panel.warning(component, message)
        elif level == "error":
            self.panel.error(component, message)
