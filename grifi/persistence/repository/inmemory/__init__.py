"""In-memory repository implementations for testing."""

from .campaign import InMemoryCampaignApplicationRepository, InMemoryCampaignRepository
from .collab_request import InMemoryCollabRequestRepository
from .message import InMemoryMessageRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryCampaignApplicationRepository",
    "InMemoryCampaignRepository",
    "InMemoryCollabRequestRepository",
    "InMemoryMessageRepository",
    "InMemoryProfileRepository",
]
