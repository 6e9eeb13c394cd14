"""Apply to campaign use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from grifi.application.usecase.campaign.common import (
    ApplicationItem,
    to_application_item,
)
from grifi.domain.service import CampaignService
from grifi.domain.value import CampaignId, UserId


class ApplyToCampaignRequest(BaseModel):
    """Apply to campaign request."""

    campaign_id: str
    influencer_id: str  # User ID from auth
    message: Optional[str] = Field(default=None, max_length=2000)


class ApplyToCampaignResponse(BaseModel):
    """Apply to campaign response."""

    application: ApplicationItem


class ApplyToCampaignUseCase:
    """Use case for a creator applying to an open campaign."""

    def __init__(self, campaign_service: CampaignService) -> None:
        """Initialize apply use case.

        Args:
            campaign_service: Campaign domain service
        """
        self.campaign_service = campaign_service

    async def execute(self, request: ApplyToCampaignRequest) -> ApplyToCampaignResponse:
        """Execute apply flow.

        Raises:
            NotFoundError: If the campaign does not exist
            ValidationError: If closed, own campaign, or already applied
        """
        application = await self.campaign_service.apply(
            CampaignId(UUID(request.campaign_id)),
            UserId(UUID(request.influencer_id)),
            request.message,
        )
        return ApplyToCampaignResponse(application=to_application_item(application))
