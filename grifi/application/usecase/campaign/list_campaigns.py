"""List campaigns use case."""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from grifi.application.usecase.campaign.common import CampaignItem, to_campaign_item
from grifi.domain.error import ValidationError
from grifi.domain.service import CampaignService
from grifi.domain.value import UserId


class CampaignScope(str, Enum):
    """Which campaigns to list."""

    OPEN = "open"  # Marketplace view for creators
    MINE = "mine"  # Brand's own campaigns


class ListCampaignsRequest(BaseModel):
    """List campaigns request."""

    scope: CampaignScope = CampaignScope.OPEN
    brand_id: Optional[str] = None  # Required for scope=mine
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListCampaignsResponse(BaseModel):
    """List campaigns response."""

    campaigns: list[CampaignItem]
    total: int


class ListCampaignsUseCase:
    """Use case for listing open campaigns or a brand's own campaigns."""

    def __init__(self, campaign_service: CampaignService) -> None:
        self.campaign_service = campaign_service

    async def execute(self, request: ListCampaignsRequest) -> ListCampaignsResponse:
        """Execute list campaigns flow, newest first."""
        if request.scope == CampaignScope.MINE:
            if not request.brand_id:
                raise ValidationError("brand_id is required to list own campaigns")
            campaigns = await self.campaign_service.list_brand_campaigns(
                UserId(UUID(request.brand_id))
            )
        else:
            campaigns = await self.campaign_service.list_open_campaigns(
                request.limit, request.offset
            )

        items = [to_campaign_item(c) for c in campaigns]
        return ListCampaignsResponse(campaigns=items, total=len(items))
