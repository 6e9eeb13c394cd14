"""Adapter DI providers."""

from collections.abc import AsyncGenerator, AsyncIterator

from dishka import Scope, provide

from grifi.adapter.changefeed import MessageFeed, MessageOutbox
from grifi.config import ChatSettings
from grifi.domain.service import MessagePublisher
from grifi.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Changefeed provider.

    One MessageFeed per process, shared by every request and websocket.
    Each request gets its own outbox in front of it.
    """

    scope = Scope.APP

    @provide
    async def get_message_feed(
        self, chat_settings: ChatSettings
    ) -> AsyncIterator[MessageFeed]:
        """Provide the message feed; shut down when the container closes."""
        feed = MessageFeed(queue_size=chat_settings.feed_queue_size)
        yield feed
        feed.shutdown()

    @provide(scope=Scope.REQUEST)
    async def get_message_outbox(
        self, feed: MessageFeed
    ) -> AsyncGenerator[MessageOutbox, BaseException | None]:
        """Provide the request's outbox.

        Flushed when the request scope closes cleanly, discarded when it
        closes with an error. The persistence session depends on the outbox,
        so this runs after the session has committed or rolled back.
        """
        outbox = MessageOutbox(feed)
        error = yield outbox
        if error is None:
            await outbox.flush()
        else:
            outbox.discard()

    @provide(scope=Scope.REQUEST)
    def get_message_publisher(self, outbox: MessageOutbox) -> MessagePublisher:
        """Provide the outbox as the domain's publisher."""
        return outbox
