"""Campaign and application repository interfaces."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from grifi.domain.model.campaign import Campaign, CampaignApplication
from grifi.domain.value import (
    ApplicationId,
    ApplicationStatus,
    CampaignId,
    CampaignStatus,
    UserId,
)


class CampaignRepository(ABC):
    """Repository for Campaign entity."""

    @abstractmethod
    async def save(self, campaign: Campaign) -> Campaign:
        """Save a campaign (create or update)."""
        pass

    @abstractmethod
    async def find_by_id(self, campaign_id: CampaignId) -> Optional[Campaign]:
        """Find a campaign by ID."""
        pass

    @abstractmethod
    async def find_by_status(
        self, status: CampaignStatus, limit: int = 20, offset: int = 0
    ) -> list[Campaign]:
        """Find campaigns with a status, newest first."""
        pass

    @abstractmethod
    async def find_by_brand(self, brand_id: UserId) -> list[Campaign]:
        """Find all campaigns of a brand, newest first."""
        pass


class CampaignApplicationRepository(ABC):
    """Repository for CampaignApplication entity."""

    @abstractmethod
    async def save(self, application: CampaignApplication) -> CampaignApplication:
        """Insert an application.

        Raises:
            IntegrityError: If the influencer already applied to the campaign
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, application_id: ApplicationId
    ) -> Optional[CampaignApplication]:
        """Find an application by ID."""
        pass

    @abstractmethod
    async def exists_for(self, campaign_id: CampaignId, influencer_id: UserId) -> bool:
        """Check whether the influencer already applied to the campaign."""
        pass

    @abstractmethod
    async def update_status(
        self,
        application_id: ApplicationId,
        new_status: ApplicationStatus,
        expected_status: ApplicationStatus,
        decided_at: datetime,
    ) -> Optional[CampaignApplication]:
        """Conditionally change an application's status.

        Returns:
            The updated application, or None if missing or no longer in
            expected_status
        """
        pass

    @abstractmethod
    async def find_by_campaign(self, campaign_id: CampaignId) -> list[CampaignApplication]:
        """Find applications to a campaign, newest first."""
        pass

    @abstractmethod
    async def find_by_influencer(self, influencer_id: UserId) -> list[CampaignApplication]:
        """Find applications of an influencer, newest first."""
        pass

    @abstractmethod
    async def exists_approved_between(self, a: UserId, b: UserId) -> bool:
        """Check for an approved application linking brand and influencer a/b.

        Either argument may be the brand.
        """
        pass
