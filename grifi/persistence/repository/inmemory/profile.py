"""In-memory profile repository for testing."""

from typing import Optional

from grifi.domain.model.profile import Profile
from grifi.domain.repository.profile import ProfileRepository
from grifi.domain.value import UserId, Username


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        for profile in self._profiles.values():
            if profile.username == username:
                return profile
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[Profile]:
        """Find profiles for several users at once."""
        return [self._profiles[uid] for uid in user_ids if uid in self._profiles]

    async def save(self, profile: Profile) -> Profile:
        """Save or update a profile."""
        self._profiles[profile.id] = profile
        return profile
