"""PostgreSQL implementations of Campaign and CampaignApplication repositories."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from grifi.domain.model import Campaign, CampaignApplication
from grifi.domain.repository import CampaignApplicationRepository, CampaignRepository
from grifi.domain.value import (
    ApplicationId,
    ApplicationStatus,
    CampaignId,
    CampaignStatus,
    UserId,
)
from grifi.persistence.mappers import (
    application_to_dict,
    campaign_to_dict,
    row_to_application,
    row_to_campaign,
)
from grifi.persistence.tables import campaign_applications_table, campaigns_table


class PostgresCampaignRepository(CampaignRepository):
    """PostgreSQL implementation of CampaignRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, campaign: Campaign) -> Campaign:
        """Save a campaign (create or update)."""
        existing = await self.find_by_id(campaign.id)
        campaign_dict = campaign_to_dict(campaign)

        if existing:
            stmt = (
                campaigns_table.update()
                .where(campaigns_table.c.id == campaign.id)
                .values(**campaign_dict)
            )
        else:
            stmt = campaigns_table.insert().values(**campaign_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return campaign

    async def find_by_id(self, campaign_id: CampaignId) -> Optional[Campaign]:
        """Find a campaign by ID."""
        stmt = select(campaigns_table).where(campaigns_table.c.id == campaign_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_campaign(dict(row)) if row else None

    async def find_by_status(
        self, status: CampaignStatus, limit: int = 20, offset: int = 0
    ) -> list[Campaign]:
        """Find campaigns with a status, newest first."""
        stmt = (
            select(campaigns_table)
            .where(campaigns_table.c.status == status.value)
            .order_by(campaigns_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_campaign(dict(row)) for row in result.mappings().all()]

    async def find_by_brand(self, brand_id: UserId) -> list[Campaign]:
        """Find all campaigns of a brand, newest first."""
        stmt = (
            select(campaigns_table)
            .where(campaigns_table.c.brand_id == brand_id)
            .order_by(campaigns_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_campaign(dict(row)) for row in result.mappings().all()]


class PostgresCampaignApplicationRepository(CampaignApplicationRepository):
    """PostgreSQL implementation of CampaignApplicationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, application: CampaignApplication) -> CampaignApplication:
        """Insert an application.

        Raises:
            IntegrityError: If the influencer already applied to the campaign
        """
        stmt = campaign_applications_table.insert().values(
            **application_to_dict(application)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return application

    async def find_by_id(
        self, application_id: ApplicationId
    ) -> Optional[CampaignApplication]:
        """Find an application by ID."""
        stmt = select(campaign_applications_table).where(
            campaign_applications_table.c.id == application_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_application(dict(row)) if row else None

    async def exists_for(self, campaign_id: CampaignId, influencer_id: UserId) -> bool:
        """Check whether the influencer already applied to the campaign."""
        stmt = (
            select(func.count())
            .select_from(campaign_applications_table)
            .where(campaign_applications_table.c.campaign_id == campaign_id)
            .where(campaign_applications_table.c.influencer_id == influencer_id)
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def update_status(
        self,
        application_id: ApplicationId,
        new_status: ApplicationStatus,
        expected_status: ApplicationStatus,
        decided_at: datetime,
    ) -> Optional[CampaignApplication]:
        """Conditionally change an application's status."""
        stmt = (
            campaign_applications_table.update()
            .where(campaign_applications_table.c.id == application_id)
            .where(campaign_applications_table.c.status == expected_status.value)
            .values(status=new_status.value, decided_at=decided_at)
            .returning(*campaign_applications_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_application(dict(row)) if row else None

    async def find_by_campaign(self, campaign_id: CampaignId) -> list[CampaignApplication]:
        """Find applications to a campaign, newest first."""
        stmt = (
            select(campaign_applications_table)
            .where(campaign_applications_table.c.campaign_id == campaign_id)
            .order_by(campaign_applications_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_application(dict(row)) for row in result.mappings().all()]

    async def find_by_influencer(self, influencer_id: UserId) -> list[CampaignApplication]:
        """Find applications of an influencer, newest first."""
        stmt = (
            select(campaign_applications_table)
            .where(campaign_applications_table.c.influencer_id == influencer_id)
            .order_by(campaign_applications_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_application(dict(row)) for row in result.mappings().all()]

    async def exists_approved_between(self, a: UserId, b: UserId) -> bool:
        """Check for an approved application linking a and b in either role."""
        t = campaign_applications_table
        stmt = (
            select(func.count())
            .select_from(t)
            .where(t.c.status == ApplicationStatus.APPROVED.value)
            .where(
                or_(
                    and_(t.c.brand_id == a, t.c.influencer_id == b),
                    and_(t.c.brand_id == b, t.c.influencer_id == a),
                )
            )
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0
