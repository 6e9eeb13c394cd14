"""Unit tests for forwarding feed messages over a websocket."""

import asyncio
from uuid import uuid4

import pytest
from fastapi import WebSocketDisconnect

from grifi.adapter.changefeed import MessageFeed
from grifi.domain.model import ChatMessage
from grifi.domain.value import MessageId, UserId
from grifi.interface.api.routes.messages import forward_subscription


class _ClientSocket:
    """Stands in for a websocket whose client read ends with ``error``."""

    def __init__(self, error: BaseException) -> None:
        self.sent: list[dict] = []
        self._error = error

    async def receive_text(self) -> str:
        raise self._error

    async def send_json(self, data: dict) -> None:
        self.sent.append(data)


class TestForwardSubscription:
    """Tests for forward_subscription."""

    @pytest.mark.asyncio
    async def test_forwards_until_client_disconnects(self):
        # Arrange
        feed = MessageFeed()
        a, b = UserId(uuid4()), UserId(uuid4())
        subscription = feed.subscribe(b)
        message = ChatMessage(
            id=MessageId(uuid4()), sender_id=a, receiver_id=b, content="hi"
        )
        await feed.publish(message)
        websocket = _ClientSocket(WebSocketDisconnect(code=1000))

        # Act
        await asyncio.wait_for(forward_subscription(websocket, subscription), timeout=1)

        # Assert
        assert [item["content"] for item in websocket.sent] == ["hi"]
        assert subscription.closed
        assert feed.subscriber_count() == 0

    @pytest.mark.asyncio
    async def test_reader_failure_is_raised(self):
        # Arrange
        feed = MessageFeed()
        subscription = feed.subscribe(UserId(uuid4()))
        websocket = _ClientSocket(RuntimeError("malformed frame"))

        # Act & Assert
        with pytest.raises(RuntimeError, match="malformed frame"):
            await asyncio.wait_for(
                forward_subscription(websocket, subscription), timeout=1
            )

        assert subscription.closed
