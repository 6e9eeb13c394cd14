"""Connection routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from grifi.application.usecase.connection import (
    GetConnectionStatusRequest,
    GetConnectionStatusResponse,
    GetConnectionStatusUseCase,
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
)
from grifi.interface.api.viewer import Viewer

router = APIRouter(prefix="/connections", tags=["connections"], route_class=DishkaRoute)


@router.get("", response_model=ListConnectionsResponse)
async def list_connections(
    viewer: FromDishka[Viewer],
    use_case: FromDishka[ListConnectionsUseCase],
) -> ListConnectionsResponse:
    """Members the viewer has an accepted collaboration with."""
    return await use_case.execute(ListConnectionsRequest(user_id=viewer.require()))


@router.get("/{other_id}", response_model=GetConnectionStatusResponse)
async def get_connection_status(
    other_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[GetConnectionStatusUseCase],
) -> GetConnectionStatusResponse:
    """Relationship between the viewer and another member.

    Returns:
        none, pending, accepted or rejected, plus whether chat is open
    """
    return await use_case.execute(
        GetConnectionStatusRequest(viewer_id=viewer.require(), other_id=str(other_id))
    )
