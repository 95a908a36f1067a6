"""Study planner module for prepmate.

Turns the knowledge base and a job description into a markdown study plan.
"""

from .context import build_plan_prompt, format_plan_sources
from .generator import (
    EMPTY_KNOWLEDGE_MESSAGE,
    FALLBACK_PLAN_TEXT,
    MISSING_INPUTS_MESSAGE,
    StudyPlanGenerator,
    validate_plan_request,
)
from .models import StudyPlan

__all__ = [
    "EMPTY_KNOWLEDGE_MESSAGE",
    "FALLBACK_PLAN_TEXT",
    "MISSING_INPUTS_MESSAGE",
    "StudyPlan",
    "StudyPlanGenerator",
    "build_plan_prompt",
    "format_plan_sources",
    "validate_plan_request",
]
