"""Unit tests for TUI widgets."""
import pytest
from textual.app import App
from textual.widgets import Button, TextArea

from prepmate.ui.widgets import ChatInputBar


class InputBarApp(App):
    """Minimal app hosting a chat input bar and recording submissions."""

    def __init__(self) -> None:
        super().__init__()
        self.submitted: list[str] = []

    def compose(self):
        yield ChatInputBar(id="chat-input-bar")

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        self.submitted.append(event.value)


class TestChatInputBar:
    """Tests for ChatInputBar submission."""

    @pytest.mark.asyncio
    async def test_submits_text_unmodified(self):
        """Test that surrounding whitespace is kept in the submitted text."""
        app = InputBarApp()
        async with app.run_test() as pilot:
            text_area = app.query_one("#chat-input", TextArea)
            text_area.text = "  def f():\n      return 1\n"
            app.query_one("#send-btn", Button).press()
            await pilot.pause()

            assert app.submitted == ["  def f():\n      return 1\n"]
            assert text_area.text == ""

    @pytest.mark.asyncio
    async def test_blank_text_not_submitted(self):
        """Test that whitespace-only input is not submitted."""
        app = InputBarApp()
        async with app.run_test() as pilot:
            app.query_one("#chat-input", TextArea).text = "   \n "
            app.query_one("#send-btn", Button).press()
            await pilot.pause()

            assert app.submitted == []

    @pytest.mark.asyncio
    async def test_busy_bar_does_not_submit(self):
        """Test that nothing is submitted while a reply is streaming."""
        app = InputBarApp()
        async with app.run_test() as pilot:
            app.query_one(ChatInputBar).set_busy(True)
            text_area = app.query_one("#chat-input", TextArea)
            text_area.text = "hello"
            text_area.focus()
            await pilot.pause()
            await pilot.press("ctrl+j")
            await pilot.pause()

            assert app.submitted == []
