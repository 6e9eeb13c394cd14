"""Create collaboration request use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.application.usecase.collab.common import CollabRequestItem, to_item
from grifi.domain.model import MemberInquiry, NewCollabRequest
from grifi.domain.service import CollabRequestService
from grifi.domain.value import RequestKind, UserId


class CreateCollabRequestRequest(BaseModel):
    """Create collaboration request request."""

    sender_id: str  # User ID from auth
    receiver_id: str
    kind: RequestKind = RequestKind.COLLAB
    message: str


class CreateCollabRequestResponse(BaseModel):
    """Create collaboration request response."""

    request: CollabRequestItem


class CreateCollabRequestUseCase:
    """Use case for a member proposing a collaboration to another member."""

    def __init__(self, collab_request_service: CollabRequestService) -> None:
        """Initialize create collaboration request use case.

        Args:
            collab_request_service: Collaboration request domain service
        """
        self.collab_request_service = collab_request_service

    async def execute(
        self, request: CreateCollabRequestRequest
    ) -> CreateCollabRequestResponse:
        """Execute create collaboration request flow.

        Args:
            request: Create request

        Returns:
            The new pending request

        Raises:
            ValidationError: If the message is invalid or sender is receiver
            NotFoundError: If the receiver does not exist
        """
        new_request = NewCollabRequest(
            inquiry=MemberInquiry(sender_id=UserId(UUID(request.sender_id))),
            receiver_id=UserId(UUID(request.receiver_id)),
            kind=request.kind,
            message=request.message,
        )
        created = await self.collab_request_service.create(new_request)
        return CreateCollabRequestResponse(request=to_item(created))
