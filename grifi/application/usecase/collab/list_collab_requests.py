"""List collaboration requests use case."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from grifi.application.usecase.collab.common import CollabRequestItem, to_item
from grifi.domain.service import CollabRequestService
from grifi.domain.value import RequestStatus, UserId


class Box(str, Enum):
    """Which side of the requests to list."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"


class ListCollabRequestsRequest(BaseModel):
    """List collaboration requests request."""

    user_id: str  # User ID from auth
    box: Box = Box.INCOMING
    status: RequestStatus | None = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListCollabRequestsResponse(BaseModel):
    """List collaboration requests response."""

    requests: list[CollabRequestItem]
    total: int


class ListCollabRequestsUseCase:
    """Use case for listing a user's incoming or outgoing requests."""

    def __init__(self, collab_request_service: CollabRequestService) -> None:
        self.collab_request_service = collab_request_service

    async def execute(
        self, request: ListCollabRequestsRequest
    ) -> ListCollabRequestsResponse:
        """Execute list flow, newest first."""
        user_id = UserId(UUID(request.user_id))

        if request.box == Box.INCOMING:
            requests = await self.collab_request_service.list_by_receiver(
                user_id, request.status, request.limit, request.offset
            )
        else:
            requests = await self.collab_request_service.list_by_sender(
                user_id, request.status, request.limit, request.offset
            )

        items = [to_item(r) for r in requests]
        return ListCollabRequestsResponse(requests=items, total=len(items))
