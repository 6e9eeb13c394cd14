"""Campaign use cases."""

from grifi.application.usecase.campaign.apply_to_campaign import (
    ApplyToCampaignRequest,
    ApplyToCampaignResponse,
    ApplyToCampaignUseCase,
)
from grifi.application.usecase.campaign.close_campaign import (
    CloseCampaignRequest,
    CloseCampaignResponse,
    CloseCampaignUseCase,
)
from grifi.application.usecase.campaign.common import ApplicationItem, CampaignItem
from grifi.application.usecase.campaign.create_campaign import (
    CreateCampaignRequest,
    CreateCampaignResponse,
    CreateCampaignUseCase,
)
from grifi.application.usecase.campaign.decide_application import (
    DecideApplicationRequest,
    DecideApplicationResponse,
    DecideApplicationUseCase,
)
from grifi.application.usecase.campaign.list_applications import (
    ListApplicationsRequest,
    ListApplicationsResponse,
    ListApplicationsUseCase,
)
from grifi.application.usecase.campaign.list_campaigns import (
    CampaignScope,
    ListCampaignsRequest,
    ListCampaignsResponse,
    ListCampaignsUseCase,
)

__all__ = [
    "ApplicationItem",
    "ApplyToCampaignRequest",
    "ApplyToCampaignResponse",
    "ApplyToCampaignUseCase",
    "CampaignItem",
    "CampaignScope",
    "CloseCampaignRequest",
    "CloseCampaignResponse",
    "CloseCampaignUseCase",
    "CreateCampaignRequest",
    "CreateCampaignResponse",
    "CreateCampaignUseCase",
    "DecideApplicationRequest",
    "DecideApplicationResponse",
    "DecideApplicationUseCase",
    "ListApplicationsRequest",
    "ListApplicationsResponse",
    "ListApplicationsUseCase",
    "ListCampaignsRequest",
    "ListCampaignsResponse",
    "ListCampaignsUseCase",
]
