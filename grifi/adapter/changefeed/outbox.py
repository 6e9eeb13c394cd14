"""Per-request buffer between the chat service and the message feed.

Messages saved during a request are held here and handed to the feed only
after the request's writes are committed. A rolled-back request publishes
nothing.
"""

import logfire

from grifi.adapter.changefeed.feed import MessageFeed
from grifi.domain.model import ChatMessage
from grifi.domain.service import MessagePublisher


class MessageOutbox(MessagePublisher):
    """Collects stored messages until the unit of work commits."""

    def __init__(self, feed: MessageFeed) -> None:
        self.feed = feed
        self._pending: list[ChatMessage] = []

    @property
    def pending(self) -> list[ChatMessage]:
        return list(self._pending)

    async def publish(self, message: ChatMessage) -> None:
        self._pending.append(message)

    async def flush(self) -> int:
        """Deliver every held message to the feed.

        Returns:
            Number of subscription deliveries made
        """
        messages, self._pending = self._pending, []
        delivered = 0
        for message in messages:
            delivered += await self.feed.publish(message)
        if messages:
            logfire.info(
                "Outbox flushed", messages=len(messages), delivered=delivered
            )
        return delivered

    def discard(self) -> int:
        """Drop held messages; returns how many were dropped."""
        dropped = len(self._pending)
        self._pending = []
        if dropped:
            logfire.warn("Outbox discarded", messages=dropped)
        return dropped
