"""Campaign and campaign application entities.

Brands publish campaigns; creators apply. An approved application opens
direct messaging between the brand and the creator.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from grifi.domain.model.common import DomainModel, utc_now
from grifi.domain.value import (
    ApplicationId,
    ApplicationStatus,
    CampaignId,
    CampaignStatus,
    UserId,
)


class Campaign(DomainModel):
    """Campaign published by a brand."""

    id: CampaignId
    brand_id: UserId
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    budget: Optional[str] = None  # Free text, e.g. "$500 - $1k"
    status: CampaignStatus = CampaignStatus.OPEN
    created_at: datetime = Field(default_factory=utc_now)


class CampaignApplication(DomainModel):
    """Application of a creator to a campaign.

    brand_id is denormalized from the campaign so decisions and the chat
    gate need a single lookup.
    """

    id: ApplicationId
    campaign_id: CampaignId
    brand_id: UserId
    influencer_id: UserId
    message: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
    decided_at: Optional[datetime] = None
