"""Text formatting utilities for the TUI.

Hides the details of how notes, sources and messages are turned into
Rich markup.
"""

from collections.abc import Sequence

from rich.markup import escape

from ..knowledge import KnowledgeSnippet
from ..llm import Source
from .config import DATE_ADDED_FORMAT, SNIPPET_PREVIEW_LENGTH, SOURCE_TITLE_MAX_LENGTH


def truncate(text: str, limit: int) -> str:
    """Shorten text to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)].rstrip() + "..."


def format_sources(sources: Sequence[Source] | None) -> str:
    """Render sources as clickable Rich links separated by spaces.

    Returns an empty string when there are no sources.
    """
    if not sources:
        return ""
    chips = [
        f"[link={escape(source.uri)}]● {escape(truncate(source.title, SOURCE_TITLE_MAX_LENGTH))}[/link]"
        for source in sources
    ]
    return "  ".join(chips)


def format_snippet_header(snippet: KnowledgeSnippet) -> str:
    """Bold title followed by the dim date the note was added."""
    added = snippet.date_added.strftime(DATE_ADDED_FORMAT)
    return f"[bold]{escape(snippet.title)}[/bold]  [dim]{added}[/dim]"


def format_snippet_preview(snippet: KnowledgeSnippet) -> str:
    return escape(truncate(snippet.content.strip(), SNIPPET_PREVIEW_LENGTH))


def format_message_header(role: str, timestamp_text: str) -> str:
    """Header line for a chat bubble."""
    if role == "user":
        return f"> You [{timestamp_text}]"
    return f"< Interviewer [{timestamp_text}]"
