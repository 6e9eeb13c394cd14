"""In-memory campaign and application repositories for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from grifi.domain.model.campaign import Campaign, CampaignApplication
from grifi.domain.repository.campaign import (
    CampaignApplicationRepository,
    CampaignRepository,
)
from grifi.domain.value import (
    ApplicationId,
    ApplicationStatus,
    CampaignId,
    CampaignStatus,
    UserId,
)


class InMemoryCampaignRepository(CampaignRepository):
    """In-memory implementation of CampaignRepository for testing."""

    def __init__(self) -> None:
        self._campaigns: dict[CampaignId, Campaign] = {}

    async def save(self, campaign: Campaign) -> Campaign:
        """Save or update a campaign."""
        self._campaigns[campaign.id] = campaign
        return campaign

    async def find_by_id(self, campaign_id: CampaignId) -> Optional[Campaign]:
        """Find a campaign by ID."""
        return self._campaigns.get(campaign_id)

    async def find_by_status(
        self, status: CampaignStatus, limit: int = 20, offset: int = 0
    ) -> list[Campaign]:
        """Find campaigns with a status, newest first."""
        campaigns = sorted(
            (c for c in self._campaigns.values() if c.status == status),
            key=lambda c: c.created_at,
            reverse=True,
        )
        return campaigns[offset : offset + limit]

    async def find_by_brand(self, brand_id: UserId) -> list[Campaign]:
        """Find all campaigns of a brand, newest first."""
        return sorted(
            (c for c in self._campaigns.values() if c.brand_id == brand_id),
            key=lambda c: c.created_at,
            reverse=True,
        )


class InMemoryCampaignApplicationRepository(CampaignApplicationRepository):
    """In-memory implementation of CampaignApplicationRepository for testing."""

    def __init__(self) -> None:
        self._applications: dict[ApplicationId, CampaignApplication] = {}

    async def save(self, application: CampaignApplication) -> CampaignApplication:
        """Insert an application, enforcing one per campaign and influencer."""
        if await self.exists_for(application.campaign_id, application.influencer_id):
            raise IntegrityError(
                "Duplicate application",
                params=None,
                orig=Exception("UNIQUE constraint failed: uq_application_per_campaign"),
            )
        self._applications[application.id] = application
        return application

    async def find_by_id(
        self, application_id: ApplicationId
    ) -> Optional[CampaignApplication]:
        """Find an application by ID."""
        return self._applications.get(application_id)

    async def exists_for(self, campaign_id: CampaignId, influencer_id: UserId) -> bool:
        """Check whether the influencer already applied to the campaign."""
        return any(
            a.campaign_id == campaign_id and a.influencer_id == influencer_id
            for a in self._applications.values()
        )

    async def update_status(
        self,
        application_id: ApplicationId,
        new_status: ApplicationStatus,
        expected_status: ApplicationStatus,
        decided_at: datetime,
    ) -> Optional[CampaignApplication]:
        """Conditionally change an application's status."""
        application = self._applications.get(application_id)
        if application is None or application.status != expected_status:
            return None

        updated = application.model_copy(
            update={"status": new_status, "decided_at": decided_at}
        )
        self._applications[application_id] = updated
        return updated

    async def find_by_campaign(self, campaign_id: CampaignId) -> list[CampaignApplication]:
        """Find applications to a campaign, newest first."""
        return sorted(
            (a for a in self._applications.values() if a.campaign_id == campaign_id),
            key=lambda a: a.created_at,
            reverse=True,
        )

    async def find_by_influencer(self, influencer_id: UserId) -> list[CampaignApplication]:
        """Find applications of an influencer, newest first."""
        return sorted(
            (a for a in self._applications.values() if a.influencer_id == influencer_id),
            key=lambda a: a.created_at,
            reverse=True,
        )

    async def exists_approved_between(self, a: UserId, b: UserId) -> bool:
        """Check for an approved application linking a and b in either role."""
        return any(
            app.status == ApplicationStatus.APPROVED
            and {app.brand_id, app.influencer_id} == {a, b}
            for app in self._applications.values()
        )
