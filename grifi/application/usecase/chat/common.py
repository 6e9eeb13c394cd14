"""Response items shared by chat use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from grifi.domain.model import ChatMessage


class MessageItem(BaseModel):
    """Chat message in responses and on the changefeed."""

    message_id: str
    sender_id: str
    receiver_id: str
    content: str
    read: bool
    client_id: Optional[str] = None
    created_at: datetime


def to_message_item(message: ChatMessage) -> MessageItem:
    return MessageItem(
        message_id=str(message.id),
        sender_id=str(message.sender_id),
        receiver_id=str(message.receiver_id),
        content=message.content,
        read=message.read,
        client_id=message.client_id,
        created_at=message.created_at,
    )
