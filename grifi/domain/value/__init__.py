"""Domain value objects for Grifi."""

from grifi.domain.value.identifiers import (
    ApplicationId,
    CampaignId,
    CollabRequestId,
    MessageId,
    UserId,
)
from grifi.domain.value.types import (
    ApplicationStatus,
    CampaignStatus,
    ConnectionStatus,
    ContactChannel,
    ContactHandle,
    ProfileRole,
    RequestKind,
    RequestStatus,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "CollabRequestId",
    "MessageId",
    "CampaignId",
    "ApplicationId",
    # Types
    "RequestKind",
    "RequestStatus",
    "ConnectionStatus",
    "ProfileRole",
    "CampaignStatus",
    "ApplicationStatus",
    "ContactChannel",
    "ContactHandle",
    "Username",
]
