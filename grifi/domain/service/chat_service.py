"""Direct messaging domain service."""

from abc import ABC, abstractmethod
from uuid import uuid4

import logfire

from grifi.domain.error import ValidationError
from grifi.domain.model import ChatMessage, utc_now
from grifi.domain.repository import MessageRepository
from grifi.domain.value import MessageId, UserId

from .base import Service
from .chat_gate_service import ChatGateService


class MessagePublisher(ABC):
    """Changefeed interface for delivering stored messages to live viewers."""

    @abstractmethod
    async def publish(self, message: ChatMessage) -> None:
        """Hand over a message saved in the current unit of work.

        Implementations must not deliver it before the write is committed.

        Args:
            message: Message that was just persisted
        """
        pass


class ChatService(Service):
    """Domain service for 1:1 messages between connected members."""

    def __init__(
        self,
        message_repository: MessageRepository,
        chat_gate_service: ChatGateService,
        publisher: MessagePublisher,
        max_message_length: int = 4000,
        history_limit: int = 200,
    ) -> None:
        """Initialize chat service.

        Args:
            message_repository: Message repository
            chat_gate_service: Gate deciding who may talk
            publisher: Changefeed publisher
            max_message_length: Upper bound for message content
            history_limit: Maximum messages returned for a conversation
        """
        self.message_repository = message_repository
        self.chat_gate_service = chat_gate_service
        self.publisher = publisher
        self.max_message_length = max_message_length
        self.history_limit = history_limit

    async def send_message(
        self,
        sender_id: UserId,
        receiver_id: UserId,
        content: str,
        client_id: str | None = None,
    ) -> ChatMessage:
        """Store a message and queue it for both participants' feeds.

        Delivery happens when the publisher's unit of work commits.

        Raises:
            ValidationError: If content is blank or too long
            ForbiddenError: If the pair may not message each other
        """
        with logfire.span(
            "chat_service.send_message",
            sender_id=str(sender_id),
            receiver_id=str(receiver_id),
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Message content is required")
            if len(content) > self.max_message_length:
                raise ValidationError(
                    f"Message must be at most {self.max_message_length} characters"
                )

            await self.chat_gate_service.ensure_can_message(sender_id, receiver_id)

            message = ChatMessage(
                id=MessageId(uuid4()),
                sender_id=sender_id,
                receiver_id=receiver_id,
                content=content,
                client_id=client_id,
                created_at=utc_now(),
            )
            saved = await self.message_repository.save(message)

            await self.publisher.publish(saved)
            logfire.info("Message sent", message_id=str(saved.id))
            return saved

    async def get_conversation(
        self, viewer_id: UserId, partner_id: UserId
    ) -> list[ChatMessage]:
        """Messages between viewer and partner, oldest first.

        Raises:
            ForbiddenError: If the pair may not message each other
        """
        with logfire.span(
            "chat_service.get_conversation",
            viewer_id=str(viewer_id),
            partner_id=str(partner_id),
        ):
            await self.chat_gate_service.ensure_can_message(viewer_id, partner_id)
            return await self.message_repository.find_conversation(
                viewer_id, partner_id, self.history_limit
            )

    async def mark_read(self, viewer_id: UserId, partner_id: UserId) -> int:
        """Mark the partner's messages to viewer as read."""
        with logfire.span(
            "chat_service.mark_read",
            viewer_id=str(viewer_id),
            partner_id=str(partner_id),
        ):
            count = await self.message_repository.mark_read(viewer_id, partner_id)
            logfire.info("Messages marked read", viewer_id=str(viewer_id), count=count)
            return count
