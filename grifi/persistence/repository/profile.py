"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grifi.domain.model import Profile
from grifi.domain.repository import ProfileRepository
from grifi.domain.value import UserId, Username
from grifi.persistence.mappers import profile_to_dict, row_to_profile
from grifi.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: User ID to look up

        Returns:
            Profile if found, None otherwise
        """
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username (case-insensitive)."""
        stmt = select(profiles_table).where(
            profiles_table.c.username.ilike(username.root)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Find profiles for several users at once."""
        if not user_ids:
            return []

        stmt = select(profiles_table).where(profiles_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        existing = await self.find_by_id(profile.id)
        profile_dict = profile_to_dict(profile)

        if existing:
            stmt = (
                profiles_table.update()
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = profiles_table.insert().values(**profile_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return profile
