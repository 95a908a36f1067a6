"""Prompt assembly for study plan generation."""

from collections.abc import Sequence

from ..knowledge import KnowledgeSnippet
from ..prompts import render_prompt


def format_plan_sources(knowledge_base: Sequence[KnowledgeSnippet]) -> str:
    """Render every snippet as a labeled source block.

    Blocks look like ``--- Source: <title> ---`` followed by the content,
    separated by blank lines.
    """
    return "\n\n".join(
        f"--- Source: {snippet.title} ---\n{snippet.content}"
        for snippet in knowledge_base
    )


def build_plan_prompt(
    role: str,
    job_description: str,
    knowledge_base: Sequence[KnowledgeSnippet]
) -> str:
    """Build the one-shot study plan prompt.

    Args:
        role: Target role, embedded verbatim
        job_description: Job description, embedded verbatim
        knowledge_base: Snippets to analyze against the JD

    Returns:
        The complete prompt text
    """
    return render_prompt(
        "study_plan",
        role=role,
        job_description=job_description,
        knowledge_context=format_plan_sources(knowledge_base),
    )
