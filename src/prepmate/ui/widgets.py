"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat bubble rendering and in-place streaming updates
- Source link chips
- Input history management
- Knowledge snippet cards
- Log rendering and level filtering
"""

from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Markdown, RichLog, Static, TextArea

from ..chat import ChatMessage, MessageState
from ..knowledge import KnowledgeSnippet
from .config import LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, THINKING_LABEL, LogLevel
from .formatting import (
    format_message_header,
    format_snippet_header,
    format_snippet_preview,
    format_sources,
    truncate,
)


class MessageBubble(Vertical):
    """A single chat message that can be re-rendered as its stream grows.

    Clicking the bubble copies its text to the clipboard.
    """

    def __init__(self, message: ChatMessage, *args, **kwargs) -> None:
        role_class = "user-message" if message.role == "user" else "model-message"
        super().__init__(*args, classes=f"chat-message {role_class}", **kwargs)
        self._message = message

    @property
    def message(self) -> ChatMessage:
        return self._message

    def compose(self):
        timestamp = self._message.timestamp.strftime("%H:%M:%S")
        yield Static(format_message_header(self._message.role, timestamp), classes="message-header")
        yield Static(THINKING_LABEL, classes="thinking")
        yield Markdown(self._message.text, classes="message-content")
        yield Static("", classes="message-sources")

    def on_mount(self) -> None:
        self._refresh_parts()

    def update_message(self, message: ChatMessage) -> None:
        """Render a newer state of the same message."""
        text_changed = message.text != self._message.text
        self._message = message
        if self.is_mounted:
            if text_changed:
                self.query_one(".message-content", Markdown).update(message.text)
            self._refresh_parts()

    def _refresh_parts(self) -> None:
        thinking = self._message.is_thinking and not self._message.text
        self.query_one(".thinking", Static).display = thinking
        self.query_one(".message-content", Markdown).display = not thinking

        sources = self.query_one(".message-sources", Static)
        sources_markup = format_sources(self._message.sources)
        sources.update(sources_markup)
        sources.display = bool(sources_markup)

        self.set_class(self._message.state is MessageState.FAILED, "-failed")

    def on_click(self, event: Click) -> None:
        event.stop()
        if self._message.text:
            self.app.copy_to_clipboard(self._message.text)
            self.app.notify("Copied to clipboard", timeout=2)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history keyed by message id."""

    BORDER_TITLE = "Mock Interview"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._bubbles: dict[str, MessageBubble] = {}

    def upsert_message(self, message: ChatMessage) -> None:
        """Mount a bubble for a new message or refresh an existing one."""
        bubble = self._bubbles.get(message.id)
        if bubble is None:
            bubble = MessageBubble(message)
            self._bubbles[message.id] = bubble
            self.mount(bubble)
            self.border_subtitle = f"{len(self._bubbles)} messages"
        else:
            bubble.update_message(message)
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last interviewer message text."""
        for bubble in reversed(list(self._bubbles.values())):
            if bubble.message.role == "model" and bubble.message.text:
                return bubble.message.text
        return None

    def clear_history(self) -> None:
        self._bubbles.clear()
        self.remove_children()
        self.border_subtitle = "Conversation history"


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._busy = False

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Submit message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if self._history_index == -1:
            self._history_index = len(self._history) - 1
        else:
            self._history_index = max(0, min(len(self._history) - 1, self._history_index + direction))
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        if self._busy:
            return
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text
        if value.strip():
            if not self._history or self._history[-1] != value:
                self._history.append(value)
            self._history_index = -1
            text_area.text = ""
            self.post_message(self.Submitted(value))

    def set_busy(self, busy: bool) -> None:
        """Disable sending while a reply is streaming."""
        self._busy = busy
        self.query_one("#send-btn", Button).disabled = busy

    def focus_input(self) -> None:
        self.query_one("#chat-input", TextArea).focus()


class RemoveSnippetButton(Button):
    """Delete button that remembers which snippet it belongs to."""

    def __init__(self, snippet_id: str) -> None:
        super().__init__("Delete", variant="error")
        self.snippet_id = snippet_id


class SnippetCard(Horizontal):
    """One knowledge base entry: title, date, content preview, delete."""

    def __init__(self, snippet: KnowledgeSnippet) -> None:
        super().__init__(classes="snippet-card")
        self.snippet = snippet

    def compose(self):
        with Vertical(classes="snippet-body"):
            yield Static(format_snippet_header(self.snippet))
            yield Static(format_snippet_preview(self.snippet))
        yield RemoveSnippetButton(self.snippet.id)


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "LLM": "magenta",
        "Planner": "bright_blue",
        "Chat": "bright_green",
        "Knowledge": "bright_yellow",
    }

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, LLM, Planner, Chat, Knowledge)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        from rich.markup import escape

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")
        text = escape(truncate(message, LOG_MAX_MESSAGE_LENGTH))

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {text}"
        )

    def debug(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
