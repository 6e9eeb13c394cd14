"""PostgreSQL repository implementations."""

from grifi.persistence.repository.campaign import (
    PostgresCampaignApplicationRepository,
    PostgresCampaignRepository,
)
from grifi.persistence.repository.collab_request import PostgresCollabRequestRepository
from grifi.persistence.repository.message import PostgresMessageRepository
from grifi.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresCollabRequestRepository",
    "PostgresMessageRepository",
    "PostgresCampaignRepository",
    "PostgresCampaignApplicationRepository",
]
