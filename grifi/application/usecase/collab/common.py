"""Response items shared by collaboration request use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from grifi.domain.model import CollabRequest, Profile
from grifi.domain.value import ContactChannel, RequestKind, RequestStatus, UserId


class PartnerProfile(BaseModel):
    """Public profile fields of the other party."""

    id: str
    username: str
    full_name: str
    avatar_url: Optional[str] = None


class GuestContact(BaseModel):
    """Contact details left by a guest."""

    handle: str
    channel: ContactChannel
    reply_url: str


class CollabRequestItem(BaseModel):
    """Collaboration request in responses."""

    request_id: str
    sender_id: Optional[str] = None
    receiver_id: str
    kind: RequestKind
    status: RequestStatus
    message: str
    is_guest: bool
    guest_contact: Optional[GuestContact] = None
    partner: Optional[PartnerProfile] = None
    created_at: datetime
    responded_at: Optional[datetime] = None


def unknown_partner(user_id: UserId) -> PartnerProfile:
    """Placeholder for a partner whose profile is missing."""
    return PartnerProfile(id=str(user_id), username="Unknown", full_name="Unknown User")


def partner_profile(profile: Profile) -> PartnerProfile:
    return PartnerProfile(
        id=str(profile.id),
        username=profile.username.root if profile.username else "",
        full_name=profile.display_name,
        avatar_url=profile.avatar_url,
    )


def to_item(
    request: CollabRequest, partner: Optional[PartnerProfile] = None
) -> CollabRequestItem:
    """Convert a domain request to a response item."""
    contact = None
    if request.guest_contact:
        contact = GuestContact(
            handle=request.guest_contact.root,
            channel=request.guest_contact.channel,
            reply_url=request.guest_contact.reply_url,
        )

    return CollabRequestItem(
        request_id=str(request.id),
        sender_id=str(request.sender_id) if request.sender_id else None,
        receiver_id=str(request.receiver_id),
        kind=request.kind,
        status=request.status,
        message=request.message,
        is_guest=request.is_guest,
        guest_contact=contact,
        partner=partner,
        created_at=request.created_at,
        responded_at=request.responded_at,
    )
