"""Interview conversation orchestration.

Owns the message history of one conversation and the model chat session
behind it. Each send appends the user's turn, streams the reply through a
StreamAggregator and publishes the message state after every increment.
"""

from collections.abc import Callable, Sequence
from typing import Any

from ..errors import ChatStreamError, ConversationBusyError
from ..knowledge import KnowledgeSnippet
from ..llm import ChatSession, ChatTurn, LLMProvider
from .aggregator import StreamAggregator
from .context import DEFAULT_CONTEXT_ROLE, build_chat_instruction, to_history
from .models import ChatMessage

ERROR_NOTICE = ChatStreamError.user_message

WELCOME_ID = "welcome"


def welcome_text(plan_role: str | None) -> str:
    """Opening line of the interviewer, depending on whether a plan exists."""
    if plan_role:
        return (
            f"I'm ready to help you prepare for the **{plan_role}** role. "
            "We can discuss your study plan, run a mock interview, or go over "
            "specific case studies. What would you like to do?"
        )
    return (
        "Please generate a study plan first, or we can just chat based on your "
        "Knowledge Base. What role are you preparing for?"
    )


class InterviewConversation:
    """A single conversation with the AI interviewer.

    The model session is created on the first send, seeded with every prior
    turn, and reused afterwards. If a send fails the session is dropped so
    the next send reseeds a fresh one from the local history.

    Sends must be serialized: calling send() while a reply is still
    streaming raises ConversationBusyError.
    """

    def __init__(
        self,
        llm: LLMProvider,
        knowledge_base: Sequence[KnowledgeSnippet],
        context_role: str = DEFAULT_CONTEXT_ROLE,
        welcome: str | None = None,
        model: str | None = None,
        web_search: bool = True,
        on_update: Callable[[ChatMessage], None] | None = None,
    ) -> None:
        self._llm = llm
        self._context_role = context_role
        self._system_instruction = build_chat_instruction(knowledge_base, context_role)
        self._model = model
        self._web_search = web_search
        self._on_update = on_update
        self._session: ChatSession | None = None
        self._messages: list[ChatMessage] = []
        self._debug_callback: Any | None = None
        self.last_error: ChatStreamError | None = None
        self.is_loading = False

        if welcome:
            self._messages.append(ChatMessage(id=WELCOME_ID, role="model", text=welcome))

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def context_role(self) -> str:
        return self._context_role

    @property
    def system_instruction(self) -> str:
        return self._system_instruction

    def history(self) -> list[ChatTurn]:
        """Wire representation of the conversation so far."""
        return to_history(self._messages)

    def set_update_callback(self, callback: Callable[[ChatMessage], None] | None) -> None:
        """Set the callback that receives every published message state."""
        self._on_update = callback

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _publish(self, message: ChatMessage) -> None:
        if self._on_update:
            self._on_update(message)

    def _append(self, message: ChatMessage) -> None:
        self._messages.append(message)
        self._publish(message.snapshot())

    async def _ensure_session(self, history: list[ChatTurn]) -> ChatSession:
        if self._session is None:
            self._debug("info", "Chat", f"Starting chat session with {len(history)} prior turn(s)")
            self._session = await self._llm.start_chat(
                self._system_instruction,
                history,
                web_search=self._web_search,
                model=self._model,
            )
        return self._session

    async def send(self, text: str) -> ChatMessage | None:
        """Send a user message and stream the interviewer's reply.

        Failures never propagate: partial text already streamed is kept and
        a separate error notice turn is appended. The failure is kept in
        ``last_error`` as a ChatStreamError chained to the transport error.

        Args:
            text: The user's message

        Returns:
            The model message that ends the exchange (the reply, or the
            error notice), or None if the input was blank

        Raises:
            ConversationBusyError: If a previous reply is still streaming
        """
        if not text.strip():
            return None
        if self.is_loading:
            raise ConversationBusyError()

        self.last_error = None
        history = self.history()
        self._append(ChatMessage(role="user", text=text))
        self.is_loading = True
        aggregator: StreamAggregator | None = None

        try:
            session = await self._ensure_session(history)
            stream = await session.send_message_stream(text)

            aggregator = StreamAggregator()
            self._append(aggregator.message)

            chunk_count = 0
            async for increment in stream:
                chunk_count += 1
                self._publish(aggregator.apply(increment))

            self._publish(aggregator.complete())
            self._debug(
                "info", "Chat",
                f"Reply complete ({chunk_count} chunks, {len(aggregator.message.text)} chars, "
                f"{len(aggregator.message.sources or [])} sources)"
            )
            if stream.usage:
                self._debug("debug", "LLM", f"Token usage: {stream.usage}")
            return aggregator.message

        except Exception as e:
            error = ChatStreamError(str(e))
            error.__cause__ = e
            self.last_error = error
            self._debug("error", "Chat", str(error))
            if aggregator is not None:
                self._publish(aggregator.fail())
            self._session = None

            notice = ChatMessage(role="model", text=ERROR_NOTICE)
            self._append(notice)
            return notice

        finally:
            self.is_loading = False
