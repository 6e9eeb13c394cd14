"""Create campaign use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from grifi.application.usecase.campaign.common import CampaignItem, to_campaign_item
from grifi.domain.service import CampaignService
from grifi.domain.value import UserId


class CreateCampaignRequest(BaseModel):
    """Create campaign request."""

    brand_id: str  # User ID from auth
    title: str = Field(max_length=200)
    description: Optional[str] = None
    budget: Optional[str] = Field(default=None, max_length=100)


class CreateCampaignResponse(BaseModel):
    """Create campaign response."""

    campaign: CampaignItem


class CreateCampaignUseCase:
    """Use case for a brand publishing a campaign."""

    def __init__(self, campaign_service: CampaignService) -> None:
        """Initialize create campaign use case.

        Args:
            campaign_service: Campaign domain service
        """
        self.campaign_service = campaign_service

    async def execute(self, request: CreateCampaignRequest) -> CreateCampaignResponse:
        """Execute create campaign flow.

        Raises:
            ForbiddenError: If the user is not a brand
            ValidationError: If the title is blank
        """
        campaign = await self.campaign_service.create_campaign(
            brand_id=UserId(UUID(request.brand_id)),
            title=request.title,
            description=request.description,
            budget=request.budget,
        )
        return CreateCampaignResponse(campaign=to_campaign_item(campaign))
