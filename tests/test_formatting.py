"""Unit tests for TUI text formatting."""
from datetime import datetime

from prepmate.knowledge import KnowledgeSnippet
from prepmate.llm import Source
from prepmate.ui.formatting import (
    format_message_header,
    format_snippet_header,
    format_sources,
    truncate,
)


class TestTruncate:
    """Tests for truncate."""

    def test_short_text_unchanged(self):
        """Test that short text is returned as-is."""
        assert truncate("short", 10) == "short"

    def test_long_text_marked(self):
        """Test that cut text ends with an ellipsis within the limit."""
        result = truncate("a" * 50, 10)
        assert result == "aaaaaaa..."
        assert len(result) == 10


class TestFormatSources:
    """Tests for source chips."""

    def test_no_sources(self):
        """Test that missing sources render as nothing."""
        assert format_sources(None) == ""
        assert format_sources([]) == ""

    def test_chips_link_to_uri(self):
        """Test that each source renders as a link chip."""
        chips = format_sources([Source(uri="https://a.com", title="A"), Source(uri="https://b.com")])
        assert "[link=https://a.com]● A[/link]" in chips
        assert "● Web Source" in chips

    def test_long_titles_truncated(self):
        """Test that long source titles are shortened."""
        chips = format_sources([Source(uri="https://a.com", title="x" * 100)])
        assert "x" * 100 not in chips
        assert "..." in chips


class TestHeaders:
    """Tests for header lines."""

    def test_message_headers(self):
        """Test the user and interviewer header lines."""
        assert format_message_header("user", "10:00") == "> You [10:00]"
        assert format_message_header("model", "10:01") == "< Interviewer [10:01]"

    def test_snippet_header_escapes_markup(self):
        """Test that snippet titles are escaped and dated."""
        snippet = KnowledgeSnippet(title="[bold]x", content="y", date_added=datetime(2024, 5, 1, 9, 30))
        header = format_snippet_header(snippet)
        assert "\\[bold]x" in header
        assert "2024-05-01 09:30" in header
