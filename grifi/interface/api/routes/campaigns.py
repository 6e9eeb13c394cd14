"""Campaign and application routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from grifi.application.usecase.campaign import (
    ApplyToCampaignRequest,
    ApplyToCampaignResponse,
    ApplyToCampaignUseCase,
    CampaignScope,
    CloseCampaignRequest,
    CloseCampaignResponse,
    CloseCampaignUseCase,
    CreateCampaignRequest,
    CreateCampaignResponse,
    CreateCampaignUseCase,
    DecideApplicationRequest,
    DecideApplicationResponse,
    DecideApplicationUseCase,
    ListApplicationsRequest,
    ListApplicationsResponse,
    ListApplicationsUseCase,
    ListCampaignsRequest,
    ListCampaignsResponse,
    ListCampaignsUseCase,
)
from grifi.interface.api.viewer import Viewer

router = APIRouter(prefix="/campaigns", tags=["campaigns"], route_class=DishkaRoute)
applications_router = APIRouter(
    prefix="/applications", tags=["campaigns"], route_class=DishkaRoute
)


class CreateCampaignAPIRequest(BaseModel):
    """API request for publishing a campaign."""

    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    budget: str | None = Field(default=None, max_length=100)


class ApplyAPIRequest(BaseModel):
    """API request for applying to a campaign."""

    message: str | None = Field(default=None, max_length=2000)


@router.post("", response_model=CreateCampaignResponse, status_code=status.HTTP_201_CREATED)
async def create_campaign(
    request: CreateCampaignAPIRequest,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[CreateCampaignUseCase],
) -> CreateCampaignResponse:
    """Publish a campaign. Brands only."""
    return await use_case.execute(
        CreateCampaignRequest(
            brand_id=viewer.require(),
            title=request.title,
            description=request.description,
            budget=request.budget,
        )
    )


@router.get("", response_model=ListCampaignsResponse)
async def list_open_campaigns(
    use_case: FromDishka[ListCampaignsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListCampaignsResponse:
    """Open campaigns, newest first."""
    return await use_case.execute(
        ListCampaignsRequest(scope=CampaignScope.OPEN, limit=limit, offset=offset)
    )


@router.get("/mine", response_model=ListCampaignsResponse)
async def list_my_campaigns(
    viewer: FromDishka[Viewer],
    use_case: FromDishka[ListCampaignsUseCase],
) -> ListCampaignsResponse:
    """The viewer's own campaigns."""
    return await use_case.execute(
        ListCampaignsRequest(scope=CampaignScope.MINE, brand_id=viewer.require())
    )


@router.post("/{campaign_id}/close", response_model=CloseCampaignResponse)
async def close_campaign(
    campaign_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[CloseCampaignUseCase],
) -> CloseCampaignResponse:
    """Stop accepting applications to a campaign."""
    return await use_case.execute(
        CloseCampaignRequest(campaign_id=str(campaign_id), actor_id=viewer.require())
    )


@router.post(
    "/{campaign_id}/applications",
    response_model=ApplyToCampaignResponse,
    status_code=status.HTTP_201_CREATED,
)
async def apply_to_campaign(
    campaign_id: UUID,
    request: ApplyAPIRequest,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[ApplyToCampaignUseCase],
) -> ApplyToCampaignResponse:
    """Apply to an open campaign. One application per campaign."""
    return await use_case.execute(
        ApplyToCampaignRequest(
            campaign_id=str(campaign_id),
            influencer_id=viewer.require(),
            message=request.message,
        )
    )


@router.get("/{campaign_id}/applications", response_model=ListApplicationsResponse)
async def list_campaign_applications(
    campaign_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[ListApplicationsUseCase],
) -> ListApplicationsResponse:
    """Applications to a campaign. Visible to the campaign's brand only."""
    return await use_case.execute(
        ListApplicationsRequest(user_id=viewer.require(), campaign_id=str(campaign_id))
    )


@applications_router.get("/mine", response_model=ListApplicationsResponse)
async def list_my_applications(
    viewer: FromDishka[Viewer],
    use_case: FromDishka[ListApplicationsUseCase],
) -> ListApplicationsResponse:
    """The viewer's own applications, newest first."""
    return await use_case.execute(ListApplicationsRequest(user_id=viewer.require()))


@applications_router.post(
    "/{application_id}/approve", response_model=DecideApplicationResponse
)
async def approve_application(
    application_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[DecideApplicationUseCase],
) -> DecideApplicationResponse:
    """Approve a pending application; opens chat with the creator."""
    return await use_case.execute(
        DecideApplicationRequest(
            application_id=str(application_id),
            actor_id=viewer.require(),
            approve=True,
        )
    )


@applications_router.post(
    "/{application_id}/reject", response_model=DecideApplicationResponse
)
async def reject_application(
    application_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[DecideApplicationUseCase],
) -> DecideApplicationResponse:
    """Reject a pending application."""
    return await use_case.execute(
        DecideApplicationRequest(
            application_id=str(application_id),
            actor_id=viewer.require(),
            approve=False,
        )
    )
