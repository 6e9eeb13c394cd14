"""Close campaign use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.application.usecase.campaign.common import CampaignItem, to_campaign_item
from grifi.domain.service import CampaignService
from grifi.domain.value import CampaignId, UserId


class CloseCampaignRequest(BaseModel):
    """Close campaign request."""

    campaign_id: str
    actor_id: str  # User ID from auth


class CloseCampaignResponse(BaseModel):
    """Close campaign response."""

    campaign: CampaignItem


class CloseCampaignUseCase:
    """Use case for a brand closing its campaign to new applications."""

    def __init__(self, campaign_service: CampaignService) -> None:
        self.campaign_service = campaign_service

    async def execute(self, request: CloseCampaignRequest) -> CloseCampaignResponse:
        campaign = await self.campaign_service.close_campaign(
            CampaignId(UUID(request.campaign_id)), UserId(UUID(request.actor_id))
        )
        return CloseCampaignResponse(campaign=to_campaign_item(campaign))
