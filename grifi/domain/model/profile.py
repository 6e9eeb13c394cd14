"""Profile entity.

Profiles are created by the hosted auth platform at sign-up and completed
during onboarding. This service only reads them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from grifi.domain.model.common import DomainModel, utc_now
from grifi.domain.value import ProfileRole, UserId, Username


class Profile(DomainModel):
    """Public profile of a creator or brand."""

    id: UserId
    username: Optional[Username] = None  # Unset until onboarding completes
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: ProfileRole = ProfileRole.CREATOR
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def display_name(self) -> str:
        """Name shown in lists, falling back to the username."""
        if self.full_name:
            return self.full_name
        if self.username:
            return self.username.root
        return "Network Member"
