"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from grifi.domain.model.profile import Profile
from grifi.domain.value import UserId, Username


class ProfileRepository(ABC):
    """Repository for Profile entity.

    Profiles are written by the auth platform and onboarding flow; the
    collaboration service reads them to resolve usernames and partners.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by public username.

        Args:
            username: Username from a /u/<username> link

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Batch-load profiles.

        Missing IDs are skipped silently.

        Args:
            user_ids: User IDs to load

        Returns:
            Profiles found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
