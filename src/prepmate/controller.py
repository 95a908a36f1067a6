"""Top-level application controller.

Owns every piece of shared state (knowledge base, active study plan,
current mode, active conversation) and passes it explicitly to the
components that need it. The UI only calls into the controller and
renders what it returns.
"""

from enum import Enum
from typing import Any

from .chat import DEFAULT_CONTEXT_ROLE, ChatMessage, InterviewConversation, welcome_text
from .errors import PlanGenerationError, PlanValidationError
from .knowledge import KnowledgeSnippet, KnowledgeStore, create_snippet
from .llm import LLMProvider
from .planner import StudyPlan, StudyPlanGenerator, validate_plan_request


class AgentMode(str, Enum):
    """Which view the user is working in."""

    MANAGE_KB = "manage_kb"
    STUDY_PLANNER = "study_planner"
    MOCK_INTERVIEW = "mock_interview"


class PrepController:
    """Coordinates knowledge, planning and interviewing for one user session."""

    def __init__(
        self,
        llm: LLMProvider,
        plan_generator: StudyPlanGenerator | None = None,
        chat_model: str | None = None,
        store: KnowledgeStore | None = None,
    ) -> None:
        self._llm = llm
        self._plan_generator = plan_generator or StudyPlanGenerator(llm)
        self._chat_model = chat_model
        self._store = store or KnowledgeStore()
        self._debug_callback: Any | None = None

        self.mode = AgentMode.MANAGE_KB
        self.current_plan: StudyPlan | None = None
        self.plan_error: str | None = None
        self.is_generating = False
        self.conversation: InterviewConversation | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging, propagated to child components.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._plan_generator.set_debug_callback(callback)
        if self.conversation is not None:
            self.conversation.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    # Knowledge base

    @property
    def knowledge_base(self) -> tuple[KnowledgeSnippet, ...]:
        return self._store.list()

    def add_snippet(self, title: str, content: str) -> KnowledgeSnippet | None:
        """Add a note; blank title or content is ignored."""
        try:
            snippet = create_snippet(title, content)
        except ValueError:
            self._debug("debug", "Knowledge", "Ignored snippet with blank title or content")
            return None
        self._store.add(snippet)
        self._debug("info", "Knowledge", f"Added '{snippet.title}' ({len(self._store)} total)")
        return snippet

    def remove_snippet(self, snippet_id: str) -> None:
        self._store.remove(snippet_id)
        self._debug("info", "Knowledge", f"Removed snippet {snippet_id} ({len(self._store)} left)")

    # Study plan

    async def generate_plan(self, role: str, job_description: str) -> StudyPlan | None:
        """Generate and activate a study plan.

        Validation and generation failures are converted into ``plan_error``;
        the previously active plan stays untouched in that case.

        Returns:
            The new plan, or None on failure
        """
        knowledge_base = self._store.list()
        try:
            validate_plan_request(role, job_description, knowledge_base)
        except PlanValidationError as e:
            self.plan_error = e.user_message
            self._debug("warning", "Planner", e.user_message)
            return None

        self.plan_error = None
        self.is_generating = True
        try:
            markdown = await self._plan_generator.generate(role, job_description, knowledge_base)
        except PlanGenerationError as e:
            self.plan_error = e.user_message
            self._debug("error", "Planner", str(e))
            return None
        finally:
            self.is_generating = False

        self.current_plan = StudyPlan(
            role=role,
            job_description=job_description,
            generated_plan=markdown,
        )
        return self.current_plan

    def clear_plan(self) -> None:
        """Drop the active plan so its inputs can be edited."""
        self.current_plan = None
        self.plan_error = None

    # Interview

    @property
    def context_role(self) -> str:
        return self.current_plan.role if self.current_plan else DEFAULT_CONTEXT_ROLE

    def new_conversation(self) -> InterviewConversation:
        """Start a fresh conversation over the current notes and plan."""
        plan_role = self.current_plan.role if self.current_plan else None
        self.conversation = InterviewConversation(
            self._llm,
            self._store.list(),
            context_role=self.context_role,
            welcome=welcome_text(plan_role),
            model=self._chat_model,
        )
        if self._debug_callback:
            self.conversation.set_debug_callback(self._debug_callback)
        self._debug("info", "Chat", f"New conversation for role '{self.context_role}'")
        return self.conversation

    def start_interview(self) -> InterviewConversation:
        self.mode = AgentMode.MOCK_INTERVIEW
        return self.new_conversation()

    def set_mode(self, mode: AgentMode) -> None:
        """Switch views; entering the interview starts a new conversation."""
        if mode is AgentMode.MOCK_INTERVIEW and self.mode is not AgentMode.MOCK_INTERVIEW:
            self.start_interview()
            return
        self.mode = mode

    async def send_message(self, text: str) -> ChatMessage | None:
        if self.conversation is None:
            self.new_conversation()
        return await self.conversation.send(text)

    async def close(self) -> None:
        """Release the LLM provider."""
        self.conversation = None
        await self._llm.close()
