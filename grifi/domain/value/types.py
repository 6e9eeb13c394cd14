"""Domain value objects for Grifi.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from grifi.domain.value.common import RootValueObject

_PHONE_RE = re.compile(r"^\+?[0-9][0-9 \-]{5,}$")
_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_.]{2,40}$")


class RequestKind(str, Enum):
    """What a collaboration request proposes."""

    COLLAB = "collab"
    SPONSORSHIP = "sponsorship"


class RequestStatus(str, Enum):
    """Lifecycle status of a collaboration request.

    COMPLETED exists in the stored enum but no operation produces it yet.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"


class ConnectionStatus(str, Enum):
    """Derived relationship status between two identities."""

    NONE = "none"
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ProfileRole(str, Enum):
    """Account type chosen during onboarding."""

    CREATOR = "creator"
    BRAND = "brand"


class CampaignStatus(str, Enum):
    """Whether a campaign accepts applications."""

    OPEN = "open"
    CLOSED = "closed"


class ApplicationStatus(str, Enum):
    """Status of a campaign application."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ContactChannel(str, Enum):
    """How a guest can be reached."""

    EMAIL = "email"
    WHATSAPP = "whatsapp"


class Username(RootValueObject[str]):
    """Public profile username, as used in /u/<username> links."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        v = v.lstrip("@")
        if not _USERNAME_RE.match(v):
            raise ValueError(
                "Username must be 2-40 characters of letters, digits, '_' or '.'"
            )
        return v.lower()


class ContactHandle(RootValueObject[str]):
    """Email address or phone number left by a guest.

    Examples: 'guest@example.com', '+44 7700 900123'
    """

    @field_validator("root")
    @classmethod
    def validate_contact(cls, v: str) -> str:
        """Validate contact is an email or phone number."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Contact must be 1-255 characters")
        if "\n" in v:
            raise ValueError("Contact must be a single line")
        if "@" in v:
            local, _, domain = v.partition("@")
            if not local or "." not in domain:
                raise ValueError("Invalid email address")
        elif not _PHONE_RE.match(v):
            raise ValueError("Contact must be an email address or phone number")
        return v

    @property
    def channel(self) -> ContactChannel:
        """Channel the web app offers for replying."""
        if "@" in self.root:
            return ContactChannel.EMAIL
        return ContactChannel.WHATSAPP

    @property
    def reply_url(self) -> str:
        """Link that opens a reply to the guest."""
        if self.channel == ContactChannel.EMAIL:
            return f"mailto:{self.root}"
        digits = re.sub(r"[^0-9]", "", self.root)
        return f"https://wa.me/{digits}"
