"""Collaboration request entity.

A proposal from one party to a member to work together, either a plain
collaboration or a sponsorship. Requests are never deleted; rejected ones
stay visible to both sides.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from grifi.domain.model.common import DomainModel, utc_now
from grifi.domain.model.inquiry import GuestInquiry, Inquiry, MemberInquiry
from grifi.domain.value import (
    CollabRequestId,
    ContactHandle,
    RequestKind,
    RequestStatus,
    UserId,
)


class CollabRequest(DomainModel):
    """Collaboration request entity.

    Business rules:
    - sender_id is None for guest inquiries, which carry guest_contact instead
    - status starts at pending and changes at most once, by the receiver
    - accepted requests open direct messaging between the two members
    """

    id: CollabRequestId
    sender_id: Optional[UserId] = None
    receiver_id: UserId
    kind: RequestKind = RequestKind.COLLAB
    status: RequestStatus = RequestStatus.PENDING
    message: str
    guest_contact: Optional[ContactHandle] = None
    created_at: datetime = Field(default_factory=utc_now)
    responded_at: Optional[datetime] = None

    @property
    def is_guest(self) -> bool:
        """Whether the request came from an anonymous visitor."""
        return self.sender_id is None

    @property
    def inquiry(self) -> MemberInquiry | GuestInquiry:
        """Origin of the request as a tagged variant."""
        if self.sender_id is None:
            return GuestInquiry(contact=self.guest_contact)
        return MemberInquiry(sender_id=self.sender_id)

    def involves(self, user_id: UserId) -> bool:
        """Whether the user is sender or receiver."""
        return user_id in (self.sender_id, self.receiver_id)

    def is_between(self, a: UserId, b: UserId) -> bool:
        """Whether the request links exactly the pair {a, b}, in either direction."""
        return (self.sender_id == a and self.receiver_id == b) or (
            self.sender_id == b and self.receiver_id == a
        )

    def partner_of(self, user_id: UserId) -> Optional[UserId]:
        """The other party from user_id's point of view (None for guests)."""
        if self.sender_id == user_id:
            return self.receiver_id
        return self.sender_id


class NewCollabRequest(BaseModel):
    """Input for creating a collaboration request."""

    inquiry: Inquiry
    receiver_id: UserId
    kind: RequestKind = RequestKind.COLLAB
    message: str
