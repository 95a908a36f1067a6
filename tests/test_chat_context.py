"""Unit tests for chat context assembly."""
from prepmate.chat import (
    DEFAULT_CONTEXT_ROLE,
    ChatMessage,
    MessageState,
    build_chat_instruction,
    format_chat_notes,
    to_history,
)
from prepmate.llm import ChatTurn, Source


class TestChatInstruction:
    """Tests for the interviewer system instruction."""

    def test_notes_rendered_as_title_entries(self, sample_knowledge_base):
        """Test that notes render as [title]: content entries."""
        notes = format_chat_notes(sample_knowledge_base)
        assert notes == (
            "[System Design]: Consistent hashing spreads keys across nodes."
            "\n\n"
            "[Python]: The GIL serializes bytecode execution."
        )

    def test_instruction_contains_role_and_notes(self, notes_snippet):
        """Test that the instruction names the role and embeds the notes."""
        instruction = build_chat_instruction([notes_snippet], "Data Engineer")

        assert '"Data Engineer"' in instruction
        assert "[Notes]: X" in instruction

    def test_instruction_lists_interviewer_rules(self, notes_snippet):
        """Test that the instruction carries the interviewer rules."""
        instruction = build_chat_instruction([notes_snippet])

        assert "PRIORITIZE" in instruction
        assert "Google Search" in instruction
        assert "critical but encouraging" in instruction
        assert "Case Study" in instruction

    def test_default_role_when_no_plan(self):
        """Test the fallback role used without a study plan."""
        instruction = build_chat_instruction([])
        assert DEFAULT_CONTEXT_ROLE == "General Interview Candidate"
        assert DEFAULT_CONTEXT_ROLE in instruction


class TestHistory:
    """Tests for reducing messages to wire turns."""

    def test_only_role_and_text_survive(self):
        """Test that history turns drop sources and state."""
        messages = [
            ChatMessage(role="user", text="What is CAP?"),
            ChatMessage(
                role="model",
                text="Consistency, availability, partition tolerance.",
                sources=[Source(uri="a.com")],
                state=MessageState.FAILED,
            ),
        ]

        assert to_history(messages) == [
            ChatTurn(role="user", text="What is CAP?"),
            ChatTurn(role="model", text="Consistency, availability, partition tolerance."),
        ]

    def test_empty_messages_skipped(self):
        """Test that empty messages are left out of history."""
        messages = [
            ChatMessage(role="user", text="hi"),
            ChatMessage(role="model", text="", state=MessageState.COMPLETE),
        ]
        assert to_history(messages) == [ChatTurn(role="user", text="hi")]
