"""Campaign domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from grifi.domain.error import (
    ConcurrencyConflictError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from grifi.domain.model import Campaign, CampaignApplication, utc_now
from grifi.domain.model.lifecycle import check_decision
from grifi.domain.repository import (
    CampaignApplicationRepository,
    CampaignRepository,
)
from grifi.domain.value import (
    ApplicationId,
    ApplicationStatus,
    CampaignId,
    CampaignStatus,
    ProfileRole,
    UserId,
)

from .base import Service
from .profile_service import ProfileService


class CampaignService(Service):
    """Domain service for campaigns and creator applications."""

    def __init__(
        self,
        campaign_repository: CampaignRepository,
        application_repository: CampaignApplicationRepository,
        profile_service: ProfileService,
    ) -> None:
        """Initialize campaign service.

        Args:
            campaign_repository: Campaign repository
            application_repository: Campaign application repository
            profile_service: Profile domain service
        """
        self.campaign_repository = campaign_repository
        self.application_repository = application_repository
        self.profile_service = profile_service

    async def create_campaign(
        self,
        brand_id: UserId,
        title: str,
        description: str | None = None,
        budget: str | None = None,
    ) -> Campaign:
        """Publish an open campaign.

        Raises:
            NotFoundError: If the brand has no profile
            ForbiddenError: If the profile is not a brand
            ValidationError: If the title is blank
        """
        with logfire.span("campaign_service.create_campaign", brand_id=str(brand_id)):
            profile = await self.profile_service.get_by_id(brand_id)
            if profile.role != ProfileRole.BRAND:
                raise ForbiddenError("Campaign", "new", str(brand_id))

            title = title.strip()
            if not title:
                raise ValidationError("Campaign title is required")

            campaign = Campaign(
                id=CampaignId(uuid4()),
                brand_id=brand_id,
                title=title,
                description=description,
                budget=budget,
                status=CampaignStatus.OPEN,
                created_at=utc_now(),
            )
            saved = await self.campaign_repository.save(campaign)
            logfire.info(
                "Campaign created", campaign_id=str(saved.id), brand_id=str(brand_id)
            )
            return saved

    async def get_campaign(self, campaign_id: CampaignId) -> Campaign:
        """Get a campaign by ID.

        Raises:
            NotFoundError: If campaign not found
        """
        campaign = await self.campaign_repository.find_by_id(campaign_id)
        if not campaign:
            raise NotFoundError("Campaign", str(campaign_id))
        return campaign

    async def close_campaign(self, campaign_id: CampaignId, actor_id: UserId) -> Campaign:
        """Stop accepting applications.

        Raises:
            NotFoundError: If campaign not found
            ForbiddenError: If actor is not the brand
        """
        with logfire.span(
            "campaign_service.close_campaign", campaign_id=str(campaign_id)
        ):
            campaign = await self.get_campaign(campaign_id)
            if campaign.brand_id != actor_id:
                raise ForbiddenError("Campaign", str(campaign_id), str(actor_id))
            closed = campaign.model_copy(update={"status": CampaignStatus.CLOSED})
            return await self.campaign_repository.save(closed)

    async def list_open_campaigns(self, limit: int = 20, offset: int = 0) -> list[Campaign]:
        """Open campaigns, newest first."""
        return await self.campaign_repository.find_by_status(
            CampaignStatus.OPEN, limit, offset
        )

    async def list_brand_campaigns(self, brand_id: UserId) -> list[Campaign]:
        """All campaigns of a brand, newest first."""
        return await self.campaign_repository.find_by_brand(brand_id)

    async def apply(
        self, campaign_id: CampaignId, influencer_id: UserId, message: str | None
    ) -> CampaignApplication:
        """Apply to an open campaign.

        Raises:
            NotFoundError: If campaign not found
            ValidationError: If the campaign is closed, the applicant is the
                brand itself, or the applicant already applied
        """
        with logfire.span(
            "campaign_service.apply",
            campaign_id=str(campaign_id),
            influencer_id=str(influencer_id),
        ):
            campaign = await self.get_campaign(campaign_id)
            if campaign.status != CampaignStatus.OPEN:
                raise ValidationError("Campaign is not accepting applications")
            if campaign.brand_id == influencer_id:
                raise ValidationError("Cannot apply to your own campaign")
            if await self.application_repository.exists_for(campaign_id, influencer_id):
                raise ValidationError("Already applied to this campaign")

            application = CampaignApplication(
                id=ApplicationId(uuid4()),
                campaign_id=campaign_id,
                brand_id=campaign.brand_id,
                influencer_id=influencer_id,
                message=(message or "").strip() or None,
                status=ApplicationStatus.PENDING,
                created_at=utc_now(),
            )

            try:
                saved = await self.application_repository.save(application)
            except IntegrityError:
                logfire.warn(
                    "Duplicate application attempt",
                    campaign_id=str(campaign_id),
                    influencer_id=str(influencer_id),
                )
                raise ValidationError("Already applied to this campaign")

            logfire.info(
                "Application submitted",
                application_id=str(saved.id),
                campaign_id=str(campaign_id),
            )
            return saved

    async def decide(
        self, application_id: ApplicationId, actor_id: UserId | None, approve: bool
    ) -> CampaignApplication:
        """Approve or reject a pending application as the campaign's brand.

        Raises:
            NotFoundError: If application not found
            ForbiddenError: If actor is not the brand
            InvalidTransitionError: If application is not pending
            ConcurrencyConflictError: If another decision won the race
        """
        target = ApplicationStatus.APPROVED if approve else ApplicationStatus.REJECTED
        with logfire.span(
            "campaign_service.decide",
            application_id=str(application_id),
            target=target.value,
        ):
            application = await self.application_repository.find_by_id(application_id)
            if not application:
                raise NotFoundError("CampaignApplication", str(application_id))

            try:
                check_decision(application, actor_id, target)
            except (ForbiddenError, InvalidTransitionError) as e:
                logfire.warn(
                    "Application decision refused",
                    application_id=str(application_id),
                    error=str(e),
                )
                raise

            updated = await self.application_repository.update_status(
                application_id, target, ApplicationStatus.PENDING, utc_now()
            )
            if updated is None:
                raise ConcurrencyConflictError(
                    "CampaignApplication", str(application_id)
                )

            logfire.info(
                "Application decided",
                application_id=str(application_id),
                status=updated.status.value,
            )
            return updated

    async def list_applications(
        self, campaign_id: CampaignId, actor_id: UserId
    ) -> list[CampaignApplication]:
        """Applications to a campaign, visible to its brand only.

        Raises:
            NotFoundError: If campaign not found
            ForbiddenError: If actor is not the brand
        """
        campaign = await self.get_campaign(campaign_id)
        if campaign.brand_id != actor_id:
            raise ForbiddenError("Campaign", str(campaign_id), str(actor_id))
        return await self.application_repository.find_by_campaign(campaign_id)

    async def list_my_applications(
        self, influencer_id: UserId
    ) -> list[CampaignApplication]:
        """Applications submitted by a creator, newest first."""
        return await self.application_repository.find_by_influencer(influencer_id)
