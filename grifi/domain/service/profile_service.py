"""Profile domain service."""

import logfire

from grifi.domain.error import NotFoundError
from grifi.domain.model import Profile
from grifi.domain.repository import ProfileRepository
from grifi.domain.value import UserId, Username

from .base import Service


class ProfileService(Service):
    """Domain service for profile lookups."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, user_id: UserId) -> Profile:
        """Get profile by user ID.

        Raises:
            NotFoundError: If profile not found
        """
        with logfire.span("profile_service.get_by_id", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def get_by_username(self, username: Username) -> Profile:
        """Get profile by public username.

        Raises:
            NotFoundError: If no profile has that username
        """
        with logfire.span("profile_service.get_by_username", username=username.root):
            profile = await self.profile_repository.find_by_username(username)
            if not profile:
                logfire.warn("Profile not found", username=username.root)
                raise NotFoundError("Profile", username.root)
            return profile

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a profile exists."""
        return await self.profile_repository.find_by_id(user_id) is not None

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, Profile]:
        """Batch-load profiles keyed by user ID.

        Args:
            user_ids: IDs to load (duplicates allowed)

        Returns:
            Mapping of found profiles; missing IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        # Single query instead of one per partner
        profiles = await self.profile_repository.find_by_ids(unique_ids)
        return {profile.id: profile for profile in profiles}
