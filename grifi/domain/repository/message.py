"""Chat message repository interface."""

from abc import ABC, abstractmethod

from grifi.domain.model.message import ChatMessage
from grifi.domain.value import UserId


class MessageRepository(ABC):
    """Repository for ChatMessage entity."""

    @abstractmethod
    async def save(self, message: ChatMessage) -> ChatMessage:
        """Insert a message.

        Args:
            message: The message to store

        Returns:
            The stored message
        """
        pass

    @abstractmethod
    async def find_conversation(
        self, a: UserId, b: UserId, limit: int = 200
    ) -> list[ChatMessage]:
        """Find the most recent messages between a and b, oldest first.

        Args:
            a: One participant
            b: The other participant
            limit: Maximum number of messages

        Returns:
            Messages in chronological order
        """
        pass

    @abstractmethod
    async def mark_read(self, receiver_id: UserId, sender_id: UserId) -> int:
        """Mark all unread messages from sender to receiver as read.

        Args:
            receiver_id: Reader
            sender_id: Author of the messages

        Returns:
            Number of messages updated
        """
        pass
