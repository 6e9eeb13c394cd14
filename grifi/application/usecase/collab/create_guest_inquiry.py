"""Create guest inquiry use case.

Visitors without an account contact a member from the member's public
profile page. They leave an email address or phone number instead of a
sender id.
"""

from typing import Optional

from pydantic import BaseModel

from grifi.application.usecase.collab.common import CollabRequestItem, to_item
from grifi.domain.error import NotFoundError, ValidationError
from grifi.domain.model import GuestInquiry, NewCollabRequest
from grifi.domain.service import CollabRequestService, ProfileService
from grifi.domain.value import ContactHandle, RequestKind, Username


class CreateGuestInquiryRequest(BaseModel):
    """Create guest inquiry request."""

    username: str  # Public username of the receiving member
    contact: Optional[str] = None  # Email or WhatsApp number
    kind: RequestKind = RequestKind.COLLAB
    message: str


class CreateGuestInquiryResponse(BaseModel):
    """Create guest inquiry response."""

    request: CollabRequestItem


class CreateGuestInquiryUseCase:
    """Use case for an anonymous visitor contacting a member."""

    def __init__(
        self,
        collab_request_service: CollabRequestService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize create guest inquiry use case.

        Args:
            collab_request_service: Collaboration request domain service
            profile_service: Profile domain service
        """
        self.collab_request_service = collab_request_service
        self.profile_service = profile_service

    async def execute(
        self, request: CreateGuestInquiryRequest
    ) -> CreateGuestInquiryResponse:
        """Execute create guest inquiry flow.

        Args:
            request: Guest inquiry request

        Returns:
            The new pending request

        Raises:
            NotFoundError: If no member has the username
            ContactRequiredError: If no contact was given
            ValidationError: If the contact or message is invalid
        """
        try:
            username = Username(request.username)
        except ValueError:
            raise NotFoundError("Profile", request.username)

        receiver = await self.profile_service.get_by_username(username)

        contact = None
        if request.contact and request.contact.strip():
            try:
                contact = ContactHandle(request.contact)
            except ValueError as e:
                raise ValidationError(f"Invalid contact: {e}")

        new_request = NewCollabRequest(
            inquiry=GuestInquiry(contact=contact),
            receiver_id=receiver.id,
            kind=request.kind,
            message=request.message,
        )
        created = await self.collab_request_service.create(new_request)
        return CreateGuestInquiryResponse(request=to_item(created))
