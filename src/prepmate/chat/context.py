"""Context assembly for interview chat sessions."""

from collections.abc import Sequence

from ..knowledge import KnowledgeSnippet
from ..llm import ChatTurn
from ..prompts import render_prompt
from .models import ChatMessage

DEFAULT_CONTEXT_ROLE = "General Interview Candidate"


def format_chat_notes(knowledge_base: Sequence[KnowledgeSnippet]) -> str:
    """Render every snippet as a ``[<title>]: <content>`` entry."""
    return "\n\n".join(
        f"[{snippet.title}]: {snippet.content}"
        for snippet in knowledge_base
    )


def build_chat_instruction(
    knowledge_base: Sequence[KnowledgeSnippet],
    context_role: str = DEFAULT_CONTEXT_ROLE
) -> str:
    """Build the system instruction shared by every turn of a conversation.

    Args:
        knowledge_base: The user's notes
        context_role: Role the candidate is preparing for

    Returns:
        System instruction text
    """
    return render_prompt(
        "interviewer",
        role=context_role,
        knowledge_context=format_chat_notes(knowledge_base),
    )


def to_history(messages: Sequence[ChatMessage]) -> list[ChatTurn]:
    """Reduce messages to wire turns, dropping sources and transient flags.

    Empty messages are skipped since the model rejects empty turns.
    """
    return [message.to_turn() for message in messages if message.text]
