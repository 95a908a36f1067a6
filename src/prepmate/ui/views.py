"""The three views of the app, one per AgentMode.

Views only render state handed to them and post messages describing what
the user asked for; the app turns those messages into controller calls.
"""

from collections.abc import Sequence

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, Markdown, Static, TextArea

from ..chat import ChatMessage
from ..knowledge import KnowledgeSnippet
from ..planner import StudyPlan
from .config import GROUNDING_NOTE, PLANNER_FOOTNOTE
from .widgets import ChatHistoryWidget, ChatInputBar, RemoveSnippetButton, SnippetCard


class KnowledgeView(Vertical):
    """Knowledge base management: add notes, list them, delete them."""

    class AddRequested(Message):
        def __init__(self, title: str, content: str) -> None:
            super().__init__()
            self.title = title
            self.content = content

    class RemoveRequested(Message):
        def __init__(self, snippet_id: str) -> None:
            super().__init__()
            self.snippet_id = snippet_id

    def compose(self):
        yield Static("Knowledge Base", classes="view-title")
        yield Static(
            "Paste your raw notes, articles, and study materials here. "
            "The agent uses this to personalize your prep.",
            classes="view-subtitle",
        )
        with Horizontal(classes="view-subtitle"):
            yield Button("Add Material", id="toggle-form", variant="primary")
        with Vertical(id="snippet-form"):
            yield Static("Title", classes="form-label")
            yield Input(placeholder="e.g., React Hooks Notes, System Design Chapter 1", id="snippet-title")
            yield Static("Content", classes="form-label")
            yield TextArea(id="snippet-content")
            yield Button("Save to Knowledge Base", id="save-snippet", variant="success")
        yield VerticalScroll(id="snippet-list")

    def on_mount(self) -> None:
        self.query_one("#snippet-form").display = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, RemoveSnippetButton):
            event.stop()
            self.post_message(self.RemoveRequested(event.button.snippet_id))
        elif event.button.id == "toggle-form":
            event.stop()
            self._set_form_visible(not self.query_one("#snippet-form").display)
        elif event.button.id == "save-snippet":
            event.stop()
            title = self.query_one("#snippet-title", Input).value
            content = self.query_one("#snippet-content", TextArea).text
            if title.strip() and content.strip():
                self.post_message(self.AddRequested(title, content))

    def _set_form_visible(self, visible: bool) -> None:
        self.query_one("#snippet-form").display = visible
        self.query_one("#toggle-form", Button).label = "Cancel" if visible else "Add Material"
        if visible:
            self.query_one("#snippet-title", Input).focus()

    def reset_form(self) -> None:
        self.query_one("#snippet-title", Input).value = ""
        self.query_one("#snippet-content", TextArea).text = ""
        self._set_form_visible(False)

    async def show_snippets(self, snippets: Sequence[KnowledgeSnippet]) -> None:
        """Re-render the list, newest first."""
        listing = self.query_one("#snippet-list", VerticalScroll)
        await listing.remove_children()
        if not snippets:
            await listing.mount(Static("Your knowledge base is empty. Add some notes to get started!", classes="muted-note"))
            return
        await listing.mount_all([SnippetCard(snippet) for snippet in snippets])


class PlannerView(Vertical):
    """Study plan form and generated plan display."""

    class GenerateRequested(Message):
        def __init__(self, role: str, job_description: str) -> None:
            super().__init__()
            self.role = role
            self.job_description = job_description

    class EditRequested(Message):
        """User wants to go back to the inputs."""

    class InterviewRequested(Message):
        """User wants to start the mock interview."""

    def compose(self):
        yield Static("Study Planner", classes="view-title")
        yield Static(
            "The AI will analyze your Knowledge Base against the Job Description "
            "to create a targeted study plan.",
            classes="view-subtitle",
        )
        with VerticalScroll(id="planner-form"):
            yield Static("Target Role", classes="form-label")
            yield Input(placeholder="e.g., Senior Frontend Engineer", id="target-role")
            yield Static("Job Description", classes="form-label")
            yield TextArea(id="job-description")
            yield Static("", id="plan-error", classes="error-text")
            yield Button("Generate Study Plan", id="generate-plan", variant="primary")
            yield Static(PLANNER_FOOTNOTE, classes="muted-note")
        with VerticalScroll(id="plan-result"):
            with Horizontal(id="plan-actions"):
                yield Button("Edit Inputs", id="edit-plan")
                yield Button("Start Mock Interview", id="start-interview", variant="success")
            yield Markdown("", id="plan-markdown")

    def on_mount(self) -> None:
        self.query_one("#plan-result").display = False
        self.show_error(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "generate-plan":
            event.stop()
            self.post_message(self.GenerateRequested(
                self.query_one("#target-role", Input).value,
                self.query_one("#job-description", TextArea).text,
            ))
        elif event.button.id == "edit-plan":
            event.stop()
            self.post_message(self.EditRequested())
        elif event.button.id == "start-interview":
            event.stop()
            self.post_message(self.InterviewRequested())

    def show_error(self, message: str | None) -> None:
        error = self.query_one("#plan-error", Static)
        error.update(message or "")
        error.display = bool(message)

    def set_generating(self, generating: bool) -> None:
        button = self.query_one("#generate-plan", Button)
        button.disabled = generating
        button.label = "Analyzing & Generating..." if generating else "Generate Study Plan"

    def show_plan(self, plan: StudyPlan | None) -> None:
        """Show the plan, or the input form prefilled from it when None."""
        if plan is None:
            self.query_one("#plan-result").display = False
            self.query_one("#planner-form").display = True
            return
        self.query_one("#target-role", Input).value = plan.role
        self.query_one("#job-description", TextArea).text = plan.job_description
        self.query_one("#plan-markdown", Markdown).update(plan.generated_plan)
        self.query_one("#planner-form").display = False
        self.query_one("#plan-result").display = True


class InterviewView(Vertical):
    """Mock interview chat."""

    def compose(self):
        yield ChatHistoryWidget(id="chat-history")
        yield ChatInputBar(id="chat-input-bar")
        yield Static(GROUNDING_NOTE, classes="muted-note")

    def reset(self, messages: Sequence[ChatMessage]) -> None:
        """Replace the displayed conversation."""
        history = self.query_one("#chat-history", ChatHistoryWidget)
        history.clear_history()
        for message in messages:
            history.upsert_message(message.snapshot())
        self.set_busy(False)

    def upsert_message(self, message: ChatMessage) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).upsert_message(message)

    def set_busy(self, busy: bool) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(busy)

    def focus_input(self) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def get_last_response(self) -> str | None:
        return self.query_one("#chat-history", ChatHistoryWidget).get_last_response()
