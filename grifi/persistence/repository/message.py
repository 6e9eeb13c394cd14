"""PostgreSQL implementation of Message repository."""

from sqlalchemy import and_, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from grifi.domain.model import ChatMessage
from grifi.domain.repository import MessageRepository
from grifi.domain.value import UserId
from grifi.persistence.mappers import message_to_dict, row_to_message
from grifi.persistence.tables import messages_table


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, message: ChatMessage) -> ChatMessage:
        """Insert a chat message."""
        stmt = messages_table.insert().values(**message_to_dict(message))
        await self.session.execute(stmt)
        await self.session.flush()
        return message

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
        stmt = (
            select(messages_table)
            .where(
                or_(
                    and_(
                        messages_table.c.sender_id == a,
                        messages_table.c.receiver_id == b,
                    ),
                    and_(
                        messages_table.c.sender_id == b,
                        messages_table.c.receiver_id == a,
                    ),
                )
            )
            .order_by(messages_table.c.created_at.desc(), messages_table.c.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        messages = [row_to_message(dict(row)) for row in result.mappings().all()]
        messages.reverse()
        return messages

    async def mark_read(self, receiver_id: UserId, sender_id: UserId) -> int:
        """Mark unread messages from sender to receiver as read."""
        stmt = (
            update(messages_table)
            .where(messages_table.c.receiver_id == receiver_id)
            .where(messages_table.c.sender_id == sender_id)
            .where(or_(messages_table.c.read.is_(False), messages_table.c.read.is_(None)))
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
