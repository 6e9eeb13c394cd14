"""Collaboration request routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from grifi.application.usecase.collab import (
    Answer,
    Box,
    CreateCollabRequestRequest,
    CreateCollabRequestResponse,
    CreateCollabRequestUseCase,
    GetCollabRequestRequest,
    GetCollabRequestResponse,
    GetCollabRequestUseCase,
    GetInboxRequest,
    GetInboxResponse,
    GetInboxUseCase,
    ListCollabRequestsRequest,
    ListCollabRequestsResponse,
    ListCollabRequestsUseCase,
    RespondToCollabRequestRequest,
    RespondToCollabRequestResponse,
    RespondToCollabRequestUseCase,
)
from grifi.domain.value import RequestKind, RequestStatus
from grifi.interface.api.viewer import Viewer

router = APIRouter(prefix="/collabs", tags=["collabs"], route_class=DishkaRoute)


class CreateCollabRequestAPIRequest(BaseModel):
    """API request for proposing a collaboration."""

    receiver_id: UUID
    kind: RequestKind = RequestKind.COLLAB
    message: str = Field(min_length=1, max_length=5000)


@router.post(
    "",
    response_model=CreateCollabRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_collab_request(
    request: CreateCollabRequestAPIRequest,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[CreateCollabRequestUseCase],
) -> CreateCollabRequestResponse:
    """Send a collaboration or sponsorship request to another member.

    Requires authentication.

    Args:
        request: Request data
        viewer: Current viewer from DI
        use_case: Create collaboration request use case from DI

    Returns:
        The new pending request
    """
    return await use_case.execute(
        CreateCollabRequestRequest(
            sender_id=viewer.require(),
            receiver_id=str(request.receiver_id),
            kind=request.kind,
            message=request.message,
        )
    )


@router.get("", response_model=ListCollabRequestsResponse)
async def list_collab_requests(
    viewer: FromDishka[Viewer],
    use_case: FromDishka[ListCollabRequestsUseCase],
    box: Box = Query(default=Box.INCOMING),
    status_filter: RequestStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListCollabRequestsResponse:
    """List the viewer's incoming or outgoing requests, newest first."""
    return await use_case.execute(
        ListCollabRequestsRequest(
            user_id=viewer.require(),
            box=box,
            status=status_filter,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/inbox", response_model=GetInboxResponse)
async def get_inbox(
    viewer: FromDishka[Viewer],
    use_case: FromDishka[GetInboxUseCase],
) -> GetInboxResponse:
    """Collaborations dashboard: pending in, pending out, and active.

    Requires authentication.
    """
    return await use_case.execute(GetInboxRequest(user_id=viewer.require()))


@router.get("/{request_id}", response_model=GetCollabRequestResponse)
async def get_collab_request(
    request_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[GetCollabRequestUseCase],
) -> GetCollabRequestResponse:
    """Get a single request. Only its sender and receiver may view it."""
    return await use_case.execute(
        GetCollabRequestRequest(request_id=str(request_id), viewer_id=viewer.require())
    )


@router.post("/{request_id}/accept", response_model=RespondToCollabRequestResponse)
async def accept_collab_request(
    request_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[RespondToCollabRequestUseCase],
) -> RespondToCollabRequestResponse:
    """Accept a pending request as its receiver.

    Accepting opens direct messaging between the two members.

    Args:
        request_id: Request to accept
        viewer: Current viewer from DI
        use_case: Respond use case from DI

    Returns:
        The accepted request
    """
    return await use_case.execute(
        RespondToCollabRequestRequest(
            request_id=str(request_id),
            actor_id=viewer.require(),
            answer=Answer.ACCEPT,
        )
    )


@router.post("/{request_id}/reject", response_model=RespondToCollabRequestResponse)
async def reject_collab_request(
    request_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[RespondToCollabRequestUseCase],
) -> RespondToCollabRequestResponse:
    """Reject a pending request as its receiver."""
    return await use_case.execute(
        RespondToCollabRequestRequest(
            request_id=str(request_id),
            actor_id=viewer.require(),
            answer=Answer.REJECT,
        )
    )
