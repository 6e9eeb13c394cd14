"""List campaign applications use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from grifi.application.usecase.campaign.common import (
    ApplicationItem,
    to_application_item,
)
from grifi.domain.service import CampaignService
from grifi.domain.value import CampaignId, UserId


class ListApplicationsRequest(BaseModel):
    """List applications request.

    With campaign_id, lists applications to that campaign (brand only);
    without it, lists the user's own applications.
    """

    user_id: str  # User ID from auth
    campaign_id: Optional[str] = None


class ListApplicationsResponse(BaseModel):
    """List applications response."""

    applications: list[ApplicationItem]
    total: int


class ListApplicationsUseCase:
    """Use case for listing campaign applications."""

    def __init__(self, campaign_service: CampaignService) -> None:
        self.campaign_service = campaign_service

    async def execute(self, request: ListApplicationsRequest) -> ListApplicationsResponse:
        """Execute list applications flow.

        Raises:
            NotFoundError: If the campaign does not exist
            ForbiddenError: If listing another brand's campaign
        """
        user_id = UserId(UUID(request.user_id))

        if request.campaign_id:
            applications = await self.campaign_service.list_applications(
                CampaignId(UUID(request.campaign_id)), user_id
            )
        else:
            applications = await self.campaign_service.list_my_applications(user_id)

        items = [to_application_item(a) for a in applications]
        return ListApplicationsResponse(applications=items, total=len(items))
