"""Collaboration request domain service."""

from uuid import uuid4

import logfire

from grifi.domain.error import (
    ConcurrencyConflictError,
    ContactRequiredError,
    NotFoundError,
    ValidationError,
)
from grifi.domain.model import (
    CollabRequest,
    GuestInquiry,
    MemberInquiry,
    NewCollabRequest,
    parse_guest_message,
    utc_now,
)
from grifi.domain.repository import CollabRequestRepository
from grifi.domain.value import CollabRequestId, RequestStatus, UserId

from .base import Service
from .profile_service import ProfileService


class CollabRequestService(Service):
    """Domain service for storing and querying collaboration requests."""

    def __init__(
        self,
        collab_request_repository: CollabRequestRepository,
        profile_service: ProfileService,
        max_message_length: int = 5000,
    ) -> None:
        """Initialize collab request service.

        Args:
            collab_request_repository: Collab request repository
            profile_service: Profile domain service
            max_message_length: Upper bound for the message body
        """
        self.collab_request_repository = collab_request_repository
        self.profile_service = profile_service
        self.max_message_length = max_message_length

    async def create(self, new_request: NewCollabRequest) -> CollabRequest:
        """Create a pending collaboration request.

        Guest inquiries without an explicit contact fall back to a contact
        embedded in the message text (the format older clients submit).

        Args:
            new_request: Request input

        Returns:
            Created request

        Raises:
            ValidationError: If the message is blank or too long, or the
                sender targets themselves
            ContactRequiredError: If a guest inquiry has no contact
            NotFoundError: If the receiver has no profile
        """
        inquiry = new_request.inquiry
        sender_id = (
            inquiry.sender_id if isinstance(inquiry, MemberInquiry) else None
        )

        with logfire.span(
            "collab_request_service.create",
            sender_id=str(sender_id) if sender_id else None,
            receiver_id=str(new_request.receiver_id),
            kind=new_request.kind.value,
            guest=sender_id is None,
        ):
            body = new_request.message
            contact = None

            if isinstance(inquiry, GuestInquiry):
                contact = inquiry.contact
                embedded = parse_guest_message(body)
                if embedded:
                    body = embedded.body
                    contact = contact or embedded.contact
                if contact is None:
                    logfire.warn(
                        "Guest inquiry without contact",
                        receiver_id=str(new_request.receiver_id),
                    )
                    raise ContactRequiredError()

            body = body.strip()
            if not body:
                raise ValidationError("Message is required")
            if len(body) > self.max_message_length:
                raise ValidationError(
                    f"Message must be at most {self.max_message_length} characters"
                )

            if sender_id is not None and sender_id == new_request.receiver_id:
                logfire.warn("Self request rejected", user_id=str(sender_id))
                raise ValidationError("Cannot send a collaboration request to yourself")

            if not await self.profile_service.exists(new_request.receiver_id):
                raise NotFoundError("Profile", str(new_request.receiver_id))

            request = CollabRequest(
                id=CollabRequestId(uuid4()),
                sender_id=sender_id,
                receiver_id=new_request.receiver_id,
                kind=new_request.kind,
                status=RequestStatus.PENDING,
                message=body,
                guest_contact=contact,
                created_at=utc_now(),
            )

            saved = await self.collab_request_repository.save(request)
            logfire.info(
                "Collab request created",
                request_id=str(saved.id),
                receiver_id=str(saved.receiver_id),
                guest=saved.is_guest,
            )
            return saved

    async def get(self, request_id: CollabRequestId) -> CollabRequest:
        """Get a request by ID.

        Raises:
            NotFoundError: If request not found
        """
        with logfire.span("collab_request_service.get", request_id=str(request_id)):
            request = await self.collab_request_repository.find_by_id(request_id)
            if not request:
                logfire.warn("Collab request not found", request_id=str(request_id))
                raise NotFoundError("CollabRequest", str(request_id))
            return request

    async def update_status(
        self,
        request_id: CollabRequestId,
        new_status: RequestStatus,
        expected_status: RequestStatus = RequestStatus.PENDING,
    ) -> CollabRequest:
        """Write a new status if the stored one still equals expected_status.

        This is the storage primitive only; who may call it is decided by
        the lifecycle service.

        Raises:
            NotFoundError: If request not found
            ConcurrencyConflictError: If the status changed in the meantime
        """
        with logfire.span(
            "collab_request_service.update_status",
            request_id=str(request_id),
            new_status=new_status.value,
            expected_status=expected_status.value,
        ):
            updated = await self.collab_request_repository.update_status(
                request_id, new_status, expected_status, utc_now()
            )
            if updated is None:
                # Distinguish a missing row from a lost race
                await self.get(request_id)
                logfire.warn(
                    "Collab request status changed concurrently",
                    request_id=str(request_id),
                    new_status=new_status.value,
                )
                raise ConcurrencyConflictError("CollabRequest", str(request_id))

            logfire.info(
                "Collab request status updated",
                request_id=str(request_id),
                status=updated.status.value,
            )
            return updated

    async def list_by_receiver(
        self,
        receiver_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """List requests received by a user, newest first."""
        with logfire.span(
            "collab_request_service.list_by_receiver",
            receiver_id=str(receiver_id),
            status=status.value if status else None,
        ):
            return await self.collab_request_repository.find_by_receiver(
                receiver_id, status, limit, offset
            )

    async def list_by_sender(
        self,
        sender_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """List requests sent by a user, newest first."""
        with logfire.span(
            "collab_request_service.list_by_sender",
            sender_id=str(sender_id),
            status=status.value if status else None,
        ):
            return await self.collab_request_repository.find_by_sender(
                sender_id, status, limit, offset
            )
