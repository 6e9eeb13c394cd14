"""Repository interfaces for the Grifi domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from grifi.domain.repository.campaign import (
    CampaignApplicationRepository,
    CampaignRepository,
)
from grifi.domain.repository.collab_request import CollabRequestRepository
from grifi.domain.repository.message import MessageRepository
from grifi.domain.repository.profile import ProfileRepository

__all__ = [
    "CampaignApplicationRepository",
    "CampaignRepository",
    "CollabRequestRepository",
    "MessageRepository",
    "ProfileRepository",
]
