"""Response items shared by campaign use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from grifi.domain.model import Campaign, CampaignApplication
from grifi.domain.value import ApplicationStatus, CampaignStatus


class CampaignItem(BaseModel):
    """Campaign in responses."""

    campaign_id: str
    brand_id: str
    title: str
    description: Optional[str] = None
    budget: Optional[str] = None
    status: CampaignStatus
    created_at: datetime


class ApplicationItem(BaseModel):
    """Campaign application in responses."""

    application_id: str
    campaign_id: str
    brand_id: str
    influencer_id: str
    message: Optional[str] = None
    status: ApplicationStatus
    created_at: datetime
    decided_at: Optional[datetime] = None


def to_campaign_item(campaign: Campaign) -> CampaignItem:
    return CampaignItem(
        campaign_id=str(campaign.id),
        brand_id=str(campaign.brand_id),
        title=campaign.title,
        description=campaign.description,
        budget=campaign.budget,
        status=campaign.status,
        created_at=campaign.created_at,
    )


def to_application_item(application: CampaignApplication) -> ApplicationItem:
    return ApplicationItem(
        application_id=str(application.id),
        campaign_id=str(application.campaign_id),
        brand_id=str(application.brand_id),
        influencer_id=str(application.influencer_id),
        message=application.message,
        status=application.status,
        created_at=application.created_at,
        decided_at=application.decided_at,
    )
