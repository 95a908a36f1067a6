"""In-memory knowledge store.

Session-only storage for study notes.
Data is lost when the application exits.
"""

from collections.abc import Iterator

from .models import KnowledgeSnippet


def create_snippet(title: str, content: str) -> KnowledgeSnippet:
    """Build a new snippet with a fresh id and the current timestamp.

    Args:
        title: Note title
        content: Note body

    Returns:
        The new snippet (not yet stored)

    Raises:
        ValueError: If title or content is blank
    """
    if not title.strip() or not content.strip():
        raise ValueError("Snippet title and content must not be empty")
    return KnowledgeSnippet(title=title, content=content)


class KnowledgeStore:
    """Ordered, newest-first collection of knowledge snippets.

    Single writer, synchronous mutation.
    """

    def __init__(self, snippets: list[KnowledgeSnippet] | None = None):
        self._snippets: list[KnowledgeSnippet] = list(snippets or [])

    def add(self, snippet: KnowledgeSnippet) -> None:
        """Prepend a snippet so the newest note comes first.

        Re-adding an id already in the store moves it to the front.
        """
        self.remove(snippet.id)
        self._snippets.insert(0, snippet)

    def remove(self, snippet_id: str) -> None:
        """Remove the snippet with this id (no-op if absent)."""
        self._snippets = [s for s in self._snippets if s.id != snippet_id]

    def list(self) -> tuple[KnowledgeSnippet, ...]:
        """Get every snippet, newest first."""
        return tuple(self._snippets)

    def get(self, snippet_id: str) -> KnowledgeSnippet | None:
        for snippet in self._snippets:
            if snippet.id == snippet_id:
                return snippet
        return None

    @property
    def is_empty(self) -> bool:
        return not self._snippets

    def __len__(self) -> int:
        return len(self._snippets)

    def __iter__(self) -> Iterator[KnowledgeSnippet]:
        return iter(tuple(self._snippets))
