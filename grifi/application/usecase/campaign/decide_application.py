"""Decide campaign application use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.application.usecase.campaign.common import (
    ApplicationItem,
    to_application_item,
)
from grifi.domain.service import CampaignService
from grifi.domain.value import ApplicationId, UserId


class DecideApplicationRequest(BaseModel):
    """Decide application request."""

    application_id: str
    actor_id: str  # User ID from auth
    approve: bool


class DecideApplicationResponse(BaseModel):
    """Decide application response."""

    application: ApplicationItem


class DecideApplicationUseCase:
    """Use case for a brand approving or rejecting an application.

    Approval opens direct messaging between the brand and the creator.
    """

    def __init__(self, campaign_service: CampaignService) -> None:
        self.campaign_service = campaign_service

    async def execute(
        self, request: DecideApplicationRequest
    ) -> DecideApplicationResponse:
        """Execute decide flow.

        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the actor is not the campaign's brand
            InvalidTransitionError: If already decided
            ConcurrencyConflictError: If another decision won the race
        """
        application = await self.campaign_service.decide(
            ApplicationId(UUID(request.application_id)),
            UserId(UUID(request.actor_id)),
            request.approve,
        )
        return DecideApplicationResponse(application=to_application_item(application))
