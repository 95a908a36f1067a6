"""Stream aggregation for model messages.

Consumes the increments of one streamed reply and derives the message
state to publish after each of them:

    PENDING --first text--> STREAMING --exhausted--> COMPLETE
       |                        |
       +--------error-----------+-----------------> FAILED

Text is only ever appended. Citations are merged into an insertion-ordered
map keyed by URI, so the first title seen for a URI wins and nothing is
ever removed.
"""

from collections.abc import Iterable

from ..llm import Source, StreamIncrement
from .models import ChatMessage, MessageState


def merge_sources(known: dict[str, Source], citations: Iterable[Source]) -> None:
    """Add citations whose URI has not been seen yet, in arrival order."""
    for citation in citations:
        if citation.uri not in known:
            known[citation.uri] = citation


class StreamAggregator:
    """Accumulates a streamed reply into a single model message.

    Usage:
        aggregator = StreamAggregator()
        publish(aggregator.snapshot())
        async for increment in stream:
            publish(aggregator.apply(increment))
        publish(aggregator.complete())
    """

    def __init__(self, message: ChatMessage | None = None) -> None:
        self._message = message or ChatMessage(
            role="model",
            text="",
            is_thinking=True,
            state=MessageState.PENDING,
        )
        self._sources: dict[str, Source] = {}
        merge_sources(self._sources, self._message.sources or ())

    @property
    def message(self) -> ChatMessage:
        """The live message being mutated by this aggregator."""
        return self._message

    @property
    def state(self) -> MessageState:
        return self._message.state

    @property
    def is_finished(self) -> bool:
        return self._message.state in (MessageState.COMPLETE, MessageState.FAILED)

    def apply(self, increment: StreamIncrement) -> ChatMessage:
        """Fold one increment into the message and return the state to publish.

        Args:
            increment: The next increment, in arrival order

        Returns:
            Snapshot of the message after the increment

        Raises:
            RuntimeError: If the stream already finished
        """
        if self.is_finished:
            raise RuntimeError(f"Cannot apply increment to a {self.state.value} message")

        if increment.text:
            self._message.text += increment.text
            if self._message.state is MessageState.PENDING:
                self._message.state = MessageState.STREAMING

        if increment.citations:
            merge_sources(self._sources, increment.citations)

        return self._publish()

    def complete(self) -> ChatMessage:
        """Mark the stream as exhausted."""
        return self._finish(MessageState.COMPLETE)

    def fail(self) -> ChatMessage:
        """Mark the stream as broken, keeping whatever text already arrived."""
        return self._finish(MessageState.FAILED)

    def snapshot(self) -> ChatMessage:
        return self._message.snapshot()

    def _finish(self, state: MessageState) -> ChatMessage:
        if not self.is_finished:
            self._message.state = state
            self._message.is_thinking = False
        return self._message.snapshot()

    def _publish(self) -> ChatMessage:
        self._message.sources = list(self._sources.values()) or None
        self._message.is_thinking = False
        return self._message.snapshot()
