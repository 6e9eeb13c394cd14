"""In-memory chat message repository for testing."""

from grifi.domain.model.message import ChatMessage
from grifi.domain.repository.message import MessageRepository
from grifi.domain.value import UserId


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []

    async def save(self, message: ChatMessage) -> ChatMessage:
        """Insert a chat message."""
        self._messages.append(message)
        return message

    async def find_conversation(
        self, a: UserId, b: UserId, limit: int = 200
    ) -> list[ChatMessage]:
        """Find the most recent messages between a and b, oldest first."""
        conversation = sorted(
            (m for m in self._messages if m.is_between(a, b)),
            key=lambda m: m.created_at,
        )
        return conversation[-limit:] if limit else []

    async def mark_read(self, receiver_id: UserId, sender_id: UserId) -> int:
        """Mark unread messages from sender to receiver as read."""
        count = 0
        for i, message in enumerate(self._messages):
            if (
                message.receiver_id == receiver_id
                and message.sender_id == sender_id
                and not message.read
            ):
                self._messages[i] = message.model_copy(update={"read": True})
                count += 1
        return count
