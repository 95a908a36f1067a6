"""Study plan generation.

One request, one markdown document. No streaming and no retries: a
transport failure surfaces as PlanGenerationError and the caller decides
what to show.
"""

from collections.abc import Sequence
from typing import Any

from ..errors import PlanGenerationError, PlanValidationError
from ..knowledge import KnowledgeSnippet
from ..llm import LLMProvider
from ..prompts import get_plan_system_prompt
from .context import build_plan_prompt

DEFAULT_PLAN_MODEL = "gemini-3-pro-preview"
DEFAULT_THINKING_BUDGET = 2048
FALLBACK_PLAN_TEXT = "Failed to generate plan."

MISSING_INPUTS_MESSAGE = "Please provide both a Target Role and a Job Description."
EMPTY_KNOWLEDGE_MESSAGE = "Please add at least one item to your Knowledge Base first."


def validate_plan_request(
    role: str,
    job_description: str,
    knowledge_base: Sequence[KnowledgeSnippet]
) -> None:
    """Check plan inputs before any request is made.

    Raises:
        PlanValidationError: If role or JD is blank, or the knowledge base is empty
    """
    if not role.strip() or not job_description.strip():
        raise PlanValidationError(MISSING_INPUTS_MESSAGE)
    if not knowledge_base:
        raise PlanValidationError(EMPTY_KNOWLEDGE_MESSAGE)


class StudyPlanGenerator:
    """Generates a markdown study plan from notes and a job description."""

    def __init__(
        self,
        llm: LLMProvider,
        model: str = DEFAULT_PLAN_MODEL,
        thinking_budget: int | None = DEFAULT_THINKING_BUDGET,
    ) -> None:
        self._llm = llm
        self._model = model
        self._thinking_budget = thinking_budget
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    def model(self) -> str:
        return self._model

    @property
    def thinking_budget(self) -> int | None:
        return self._thinking_budget

    async def generate(
        self,
        role: str,
        job_description: str,
        knowledge_base: Sequence[KnowledgeSnippet]
    ) -> str:
        """Generate the study plan markdown.

        Args:
            role: Target role
            job_description: Job description text
            knowledge_base: The user's notes

        Returns:
            The model's markdown verbatim, or "Failed to generate plan."
            when the model returned no text

        Raises:
            PlanGenerationError: If the request fails
        """
        prompt = build_plan_prompt(role, job_description, knowledge_base)
        self._debug("debug", "Planner", f"Plan prompt built ({len(prompt)} chars, {len(knowledge_base)} sources)")
        self._debug("info", "LLM", f"Requesting study plan from {self._model}...")

        try:
            response = await self._llm.generate(
                prompt,
                system_instruction=get_plan_system_prompt(),
                model=self._model,
                thinking_budget=self._thinking_budget,
            )
        except Exception as e:
            self._debug("error", "LLM", f"Plan request failed: {e}")
            raise PlanGenerationError(str(e)) from e

        if not response.content:
            self._debug("warning", "LLM", "Model returned an empty plan")
            return FALLBACK_PLAN_TEXT

        self._debug("info", "LLM", f"Plan received ({len(response.content)} chars)")
        if response.usage:
            self._debug("debug", "LLM", f"Token usage: {response.usage}")
        return response.content
