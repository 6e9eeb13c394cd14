"""List connections use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.domain.service import ConnectionService
from grifi.domain.value import UserId


class ListConnectionsRequest(BaseModel):
    """List connections request."""

    user_id: str  # User ID from auth


class ListConnectionsResponse(BaseModel):
    """List connections response."""

    connection_ids: list[str]
    total: int


class ListConnectionsUseCase:
    """Use case for listing members the user has an accepted request with."""

    def __init__(self, connection_service: ConnectionService) -> None:
        self.connection_service = connection_service

    async def execute(self, request: ListConnectionsRequest) -> ListConnectionsResponse:
        """Execute list connections flow."""
        user_id = UserId(UUID(request.user_id))
        partner_ids = await self.connection_service.list_connections(user_id)
        return ListConnectionsResponse(
            connection_ids=[str(p) for p in partner_ids], total=len(partner_ids)
        )
