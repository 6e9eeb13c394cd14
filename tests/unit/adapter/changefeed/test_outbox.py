"""Unit tests for MessageOutbox and its request-scoped lifecycle."""

from uuid import uuid4

import pytest

from grifi.adapter.changefeed import MessageFeed, MessageOutbox, Subscription
from grifi.domain.model import ChatMessage
from grifi.domain.repository import CollabRequestRepository
from grifi.domain.service import ChatService, MessagePublisher
from grifi.domain.value import MessageId, RequestStatus, UserId
from tests.conftest import make_request
from tests.di import build_test_container


def _message(sender_id: UserId, receiver_id: UserId) -> ChatMessage:
    return ChatMessage(
        id=MessageId(uuid4()),
        sender_id=sender_id,
        receiver_id=receiver_id,
        content="hi",
    )


async def _drain(subscription: Subscription) -> list[ChatMessage]:
    subscription.close()
    return [message async for message in subscription]


class TestMessageOutbox:
    """Tests for holding messages until flush."""

    @pytest.mark.asyncio
    async def test_publish_holds_until_flush(self):
        # Arrange
        feed = MessageFeed()
        outbox = MessageOutbox(feed)
        a, b = UserId(uuid4()), UserId(uuid4())
        subscription = feed.subscribe(b)
        message = _message(a, b)

        # Act
        await outbox.publish(message)
        delivered = await outbox.flush()

        # Assert
        assert delivered == 1
        assert outbox.pending == []
        assert await _drain(subscription) == [message]

    @pytest.mark.asyncio
    async def test_discard_drops_held_messages(self):
        # Arrange
        feed = MessageFeed()
        outbox = MessageOutbox(feed)
        a, b = UserId(uuid4()), UserId(uuid4())
        subscription = feed.subscribe(b)
        await outbox.publish(_message(a, b))

        # Act
        dropped = outbox.discard()

        # Assert
        assert dropped == 1
        assert await outbox.flush() == 0
        assert await _drain(subscription) == []

    def test_publisher_interface_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            MessagePublisher()

        assert isinstance(MessageOutbox(MessageFeed()), MessagePublisher)


class TestRequestScope:
    """Outbox delivery is tied to how the request scope ends."""

    @pytest.mark.asyncio
    async def test_clean_exit_publishes_sent_message(self):
        # Arrange
        container = build_test_container()
        feed = await container.get(MessageFeed)
        a, b = UserId(uuid4()), UserId(uuid4())
        subscription = feed.subscribe(b)

        # Act
        async with container() as request_container:
            request_repo = await request_container.get(CollabRequestRepository)
            await make_request(request_repo, a, b, status=RequestStatus.ACCEPTED)
            chat = await request_container.get(ChatService)
            sent = await chat.send_message(a, b, "hello")

        # Assert
        assert await _drain(subscription) == [sent]
        await container.close()

    @pytest.mark.asyncio
    async def test_failed_request_publishes_nothing(self):
        # Arrange
        container = build_test_container()
        feed = await container.get(MessageFeed)
        a, b = UserId(uuid4()), UserId(uuid4())
        subscription = feed.subscribe(b)

        # Act
        with pytest.raises(RuntimeError):
            async with container() as request_container:
                request_repo = await request_container.get(CollabRequestRepository)
                await make_request(request_repo, a, b, status=RequestStatus.ACCEPTED)
                chat = await request_container.get(ChatService)
                await chat.send_message(a, b, "hello")
                raise RuntimeError("handler failed after save")

        # Assert
        assert await _drain(subscription) == []
        await container.close()
