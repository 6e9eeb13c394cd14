"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from grifi.domain.model import (
    Campaign,
    CampaignApplication,
    ChatMessage,
    CollabRequest,
    Profile,
)
from grifi.domain.model.inquiry import encode_guest_message, parse_guest_message
from grifi.domain.value import (
    ApplicationId,
    ApplicationStatus,
    CampaignId,
    CampaignStatus,
    CollabRequestId,
    MessageId,
    ProfileRole,
    RequestKind,
    RequestStatus,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]) if row.get("username") else None,
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
        role=ProfileRole(row.get("role") or ProfileRole.CREATOR.value),
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return {
        "id": profile.id,
        "username": profile.username.root if profile.username else None,
        "full_name": profile.full_name,
        "avatar_url": profile.avatar_url,
        "role": profile.role.value,
        "created_at": profile.created_at,
    }


def row_to_collab_request(row: Dict[str, Any]) -> CollabRequest:
    """Convert database row to CollabRequest domain model.

    Guest rows carry the contact embedded in the message text; it is
    split back out into guest_contact. A guest row whose message is not
    in the guest format keeps the raw text and has no contact.

    Args:
        row: Database row as dict

    Returns:
        CollabRequest domain model
    """
    sender_id = row.get("sender_id")
    message = row.get("message") or ""
    guest_contact = None

    if sender_id is None:
        parsed = parse_guest_message(message)
        if parsed:
            message = parsed.body
            guest_contact = parsed.contact

    return CollabRequest(
        id=CollabRequestId(_uuid(row["id"])),
        sender_id=UserId(_uuid(sender_id)) if sender_id else None,
        receiver_id=UserId(_uuid(row["receiver_id"])),
        kind=RequestKind(row["type"]),
        # Rows written before the status column existed read as pending
        status=RequestStatus(row.get("status") or RequestStatus.PENDING.value),
        message=message,
        guest_contact=guest_contact,
        created_at=row["created_at"],
        responded_at=row.get("responded_at"),
    )


def collab_request_to_dict(request: CollabRequest) -> Dict[str, Any]:
    """Convert CollabRequest domain model to database dict.

    Args:
        request: CollabRequest domain model

    Returns:
        Dict suitable for database insertion
    """
    message = request.message
    if request.is_guest and request.guest_contact:
        message = encode_guest_message(request.guest_contact, request.message)

    return {
        "id": request.id,
        "sender_id": request.sender_id,
        "receiver_id": request.receiver_id,
        "type": request.kind.value,
        "status": request.status.value,
        "message": message,
        "created_at": request.created_at,
        "responded_at": request.responded_at,
    }


def row_to_message(row: Dict[str, Any]) -> ChatMessage:
    """Convert database row to ChatMessage domain model."""
    return ChatMessage(
        id=MessageId(_uuid(row["id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        receiver_id=UserId(_uuid(row["receiver_id"])),
        content=row["content"],
        read=bool(row.get("read")),
        client_id=row.get("client_id"),
        created_at=row["created_at"],
    )


def message_to_dict(message: ChatMessage) -> Dict[str, Any]:
    """Convert ChatMessage domain model to database dict."""
    return message.model_dump()


def row_to_campaign(row: Dict[str, Any]) -> Campaign:
    """Convert database row to Campaign domain model."""
    return Campaign(
        id=CampaignId(_uuid(row["id"])),
        brand_id=UserId(_uuid(row["brand_id"])),
        title=row["title"],
        description=row.get("description"),
        budget=row.get("budget"),
        status=CampaignStatus(row["status"]),
        created_at=row["created_at"],
    )


def campaign_to_dict(campaign: Campaign) -> Dict[str, Any]:
    """Convert Campaign domain model to database dict."""
    data = campaign.model_dump()
    data["status"] = campaign.status.value
    return data


def row_to_application(row: Dict[str, Any]) -> CampaignApplication:
    """Convert database row to CampaignApplication domain model."""
    return CampaignApplication(
        id=ApplicationId(_uuid(row["id"])),
        campaign_id=CampaignId(_uuid(row["campaign_id"])),
        brand_id=UserId(_uuid(row["brand_id"])),
        influencer_id=UserId(_uuid(row["influencer_id"])),
        message=row.get("message"),
        status=ApplicationStatus(row["status"]),
        created_at=row["created_at"],
        decided_at=row.get("decided_at"),
    )


def application_to_dict(application: CampaignApplication) -> Dict[str, Any]:
    """Convert CampaignApplication domain model to database dict."""
    data = application.model_dump()
    data["status"] = application.status.value
    return data
