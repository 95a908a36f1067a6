"""Main Textual TUI application.

Orchestrates the views and routes user interaction to the PrepController.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, ContentSwitcher, Footer, Header

from ..controller import AgentMode, PrepController
from ..errors import ConversationBusyError
from .callbacks import ChatViewCallback, DebugLogCallback
from .config import LogLevel
from .styles import APP_CSS
from .themes import SLATE_STUDY
from .views import InterviewView, KnowledgeView, PlannerView
from .widgets import ChatInputBar, DebugPanel

VIEW_IDS = {
    AgentMode.MANAGE_KB: "kb-view",
    AgentMode.STUDY_PLANNER: "planner-view",
    AgentMode.MOCK_INTERVIEW: "interview-view",
}

MODE_BUTTONS = {
    "mode-kb": AgentMode.MANAGE_KB,
    "mode-planner": AgentMode.STUDY_PLANNER,
    "mode-interview": AgentMode.MOCK_INTERVIEW,
}


class PrepMateApp(App):
    """Textual TUI for interview preparation."""

    CSS = APP_CSS
    TITLE = "PrepMate"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("f1", "show_mode('manage_kb')", "Knowledge"),
        Binding("f2", "show_mode('study_planner')", "Planner"),
        Binding("f3", "show_mode('mock_interview')", "Interview"),
        Binding("ctrl+k", "new_conversation", "New Chat"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(self, controller: PrepController, log_level: str | None = None) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="main"):
            with Vertical(id="mode-bar"):
                yield Button("Knowledge Base", id="mode-kb")
                yield Button("Study Planner", id="mode-planner")
                yield Button("Mock Interview", id="mode-interview")
            with ContentSwitcher(id="views", initial=VIEW_IDS[AgentMode.MANAGE_KB]):
                yield KnowledgeView(id="kb-view")
                yield PlannerView(id="planner-view")
                yield InterviewView(id="interview-view")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    async def on_mount(self) -> None:
        self.register_theme(SLATE_STUDY)
        self.theme = "slate-study"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")
        self._controller.set_debug_callback(DebugLogCallback(log_panel))

        self.sub_title = self._controller.context_role
        await self.query_one(KnowledgeView).show_snippets(self._controller.knowledge_base)
        self._show_mode(self._controller.mode)

    def _log(self, level: str, message: str) -> None:
        DebugLogCallback(self.query_one("#debug-panel", DebugPanel))(level, "TUI", message)

    # Mode switching

    def on_button_pressed(self, event: Button.Pressed) -> None:
        mode = MODE_BUTTONS.get(event.button.id or "")
        if mode is not None:
            self.action_show_mode(mode.value)

    def action_show_mode(self, mode_value: str) -> None:
        mode = AgentMode(mode_value)
        if mode is self._controller.mode:
            return
        if mode is AgentMode.MOCK_INTERVIEW:
            self._begin_conversation(switch_mode=True)
            return
        self.workers.cancel_group(self, "chat")
        self._controller.set_mode(mode)
        self._show_mode(mode)

    def _show_mode(self, mode: AgentMode) -> None:
        self.query_one("#views", ContentSwitcher).current = VIEW_IDS[mode]
        for button_id, button_mode in MODE_BUTTONS.items():
            self.query_one(f"#{button_id}", Button).set_class(button_mode is mode, "-active")
        if mode is AgentMode.MOCK_INTERVIEW:
            self.query_one(InterviewView).focus_input()

    def _begin_conversation(self, switch_mode: bool) -> None:
        """Start a new conversation and bind it to the interview view."""
        self.workers.cancel_group(self, "chat")
        if switch_mode:
            conversation = self._controller.start_interview()
        else:
            conversation = self._controller.new_conversation()

        view = self.query_one(InterviewView)
        conversation.set_update_callback(ChatViewCallback(view))
        view.reset(conversation.messages)
        self._show_mode(AgentMode.MOCK_INTERVIEW)

    # Knowledge base

    async def on_knowledge_view_add_requested(self, event: KnowledgeView.AddRequested) -> None:
        snippet = self._controller.add_snippet(event.title, event.content)
        if snippet is None:
            return
        view = self.query_one(KnowledgeView)
        view.reset_form()
        await view.show_snippets(self._controller.knowledge_base)
        self.notify(f"Added '{snippet.title}'", timeout=2)

    async def on_knowledge_view_remove_requested(self, event: KnowledgeView.RemoveRequested) -> None:
        self._controller.remove_snippet(event.snippet_id)
        await self.query_one(KnowledgeView).show_snippets(self._controller.knowledge_base)

    # Study planner

    def on_planner_view_generate_requested(self, event: PlannerView.GenerateRequested) -> None:
        if self._controller.is_generating:
            return
        self._generate_plan(event.role, event.job_description)

    @work(exclusive=True, group="plan")
    async def _generate_plan(self, role: str, job_description: str) -> None:
        view = self.query_one(PlannerView)
        view.show_error(None)
        view.set_generating(True)
        try:
            plan = await self._controller.generate_plan(role, job_description)
        finally:
            view.set_generating(False)

        if plan is None:
            view.show_error(self._controller.plan_error)
            self.notify(self._controller.plan_error or "Plan generation failed", severity="error", timeout=5)
            return

        view.show_plan(plan)
        self.sub_title = plan.role
        self.notify("Study plan ready", severity="information", timeout=3)

    def on_planner_view_edit_requested(self, event: PlannerView.EditRequested) -> None:
        self._controller.clear_plan()
        self.query_one(PlannerView).show_plan(None)
        self.sub_title = self._controller.context_role

    def on_planner_view_interview_requested(self, event: PlannerView.InterviewRequested) -> None:
        self._begin_conversation(switch_mode=True)

    # Interview

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        conversation = self._controller.conversation
        if conversation is None or conversation.is_loading:
            return
        self.query_one(InterviewView).set_busy(True)
        self._send_message(event.value)

    @work(group="chat")
    async def _send_message(self, text: str) -> None:
        view = self.query_one(InterviewView)
        self._log("info", f"Sending: '{text[:50]}'")
        try:
            await self._controller.send_message(text)
        except ConversationBusyError as e:
            self.notify(e.user_message, severity="warning", timeout=3)
        except asyncio.CancelledError:
            self._log("warning", "Reply cancelled")
            raise
        finally:
            view.set_busy(False)

        conversation = self._controller.conversation
        if conversation is not None and conversation.last_error is not None:
            self.notify(str(conversation.last_error.__cause__), title="Chat error", severity="error", timeout=5)

    def action_new_conversation(self) -> None:
        self._begin_conversation(switch_mode=self._controller.mode is not AgentMode.MOCK_INTERVIEW)
        self.notify("New conversation", timeout=2)

    def action_copy_last_response(self) -> None:
        response = self.query_one(InterviewView).get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")

    def action_toggle_debug(self) -> None:
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(controller: PrepController, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        controller: Controller owning the session state
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = PrepMateApp(controller=controller, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await controller.close()
