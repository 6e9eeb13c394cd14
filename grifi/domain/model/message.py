"""Direct message entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from grifi.domain.model.common import DomainModel, utc_now
from grifi.domain.value import MessageId, UserId


class ChatMessage(DomainModel):
    """1:1 message between two members.

    client_id is the sender's local id for the optimistic copy, echoed back
    so the sender's view can swap it for the stored message.
    """

    id: MessageId
    sender_id: UserId
    receiver_id: UserId
    content: str
    read: bool = False
    client_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    def is_between(self, a: UserId, b: UserId) -> bool:
        """Whether the message belongs to the conversation of a and b."""
        return (self.sender_id == a and self.receiver_id == b) or (
            self.sender_id == b and self.receiver_id == a
        )
