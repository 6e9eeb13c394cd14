"""In-process changefeed for chat messages.

Each live viewer (one websocket connection) holds a Subscription. A stored
message is delivered to every subscription whose viewer is the sender or the
receiver. Delivery is best effort: a subscriber that falls behind loses its
oldest undelivered events rather than blocking the sender.
"""

import asyncio
from typing import AsyncIterator, Optional

import logfire

from grifi.adapter.error import FeedClosedError
from grifi.domain.model import ChatMessage
from grifi.domain.value import UserId


class Subscription:
    """A viewer's stream of delivered messages.

    Iterate with ``async for``; iteration ends after ``close()``.
    """

    def __init__(self, feed: "MessageFeed", viewer_id: UserId, maxsize: int) -> None:
        self.feed = feed
        self.viewer_id = viewer_id
        self.dropped = 0
        self._queue: asyncio.Queue[Optional[ChatMessage]] = asyncio.Queue(
            maxsize=maxsize
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def deliver(self, message: ChatMessage) -> None:
        """Enqueue a message, dropping the oldest one if the queue is full."""
        if self._closed:
            return
        if self._queue.full():
            self._queue.get_nowait()
            self.dropped += 1
        self._queue.put_nowait(message)

    async def get(self) -> Optional[ChatMessage]:
        """Wait for the next message; None once the subscription is closed."""
        if self._closed and self._queue.empty():
            return None
        return await self._queue.get()

    def close(self) -> None:
        """Stop the subscription and wake any pending reader."""
        if self._closed:
            return
        self._closed = True
        self.feed.unsubscribe(self)
        if self._queue.full():
            self._queue.get_nowait()
        self._queue.put_nowait(None)

    def __aiter__(self) -> AsyncIterator[ChatMessage]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[ChatMessage]:
        while True:
            message = await self.get()
            if message is None:
                return
            yield message


class MessageFeed:
    """Publish/subscribe broker for stored chat messages."""

    def __init__(self, queue_size: int = 100) -> None:
        """Initialize the feed.

        Args:
            queue_size: Per-subscription buffer size
        """
        self.queue_size = queue_size
        self._subscriptions: dict[UserId, list[Subscription]] = {}
        self._shut_down = False

    def subscribe(self, viewer_id: UserId) -> Subscription:
        """Open a subscription for a viewer.

        Raises:
            FeedClosedError: If the feed has been shut down
        """
        if self._shut_down:
            raise FeedClosedError("Message feed is shut down")

        subscription = Subscription(self, viewer_id, self.queue_size)
        self._subscriptions.setdefault(viewer_id, []).append(subscription)
        logfire.debug("Feed subscription opened", viewer_id=str(viewer_id))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        subscriptions = self._subscriptions.get(subscription.viewer_id, [])
        if subscription in subscriptions:
            subscriptions.remove(subscription)
        if not subscriptions:
            self._subscriptions.pop(subscription.viewer_id, None)

    def subscriber_count(self, viewer_id: UserId | None = None) -> int:
        if viewer_id is not None:
            return len(self._subscriptions.get(viewer_id, []))
        return sum(len(subs) for subs in self._subscriptions.values())

    async def publish(self, message: ChatMessage) -> int:
        """Deliver a stored message to the sender's and receiver's subscriptions.

        Args:
            message: Persisted message

        Returns:
            Number of subscriptions the message was delivered to
        """
        delivered = 0
        for viewer_id in {message.sender_id, message.receiver_id}:
            for subscription in list(self._subscriptions.get(viewer_id, [])):
                subscription.deliver(message)
                delivered += 1
        return delivered

    def shutdown(self) -> None:
        """Close every subscription and refuse new ones."""
        self._shut_down = True
        for subscriptions in list(self._subscriptions.values()):
            for subscription in list(subscriptions):
                subscription.close()
        logfire.info("Message feed shut down")
