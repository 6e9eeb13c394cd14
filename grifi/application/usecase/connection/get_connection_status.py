"""Get connection status use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.domain.service import ChatGateService, ConnectionService
from grifi.domain.value import ConnectionStatus, UserId


class GetConnectionStatusRequest(BaseModel):
    """Get connection status request."""

    viewer_id: str  # User ID from auth
    other_id: str


class GetConnectionStatusResponse(BaseModel):
    """Get connection status response."""

    other_id: str
    status: ConnectionStatus
    can_message: bool


class GetConnectionStatusUseCase:
    """Use case for the relationship shown on another member's profile."""

    def __init__(
        self,
        connection_service: ConnectionService,
        chat_gate_service: ChatGateService,
    ) -> None:
        """Initialize get connection status use case.

        Args:
            connection_service: Connection domain service
            chat_gate_service: Chat gate domain service
        """
        self.connection_service = connection_service
        self.chat_gate_service = chat_gate_service

    async def execute(
        self, request: GetConnectionStatusRequest
    ) -> GetConnectionStatusResponse:
        """Execute get connection status flow."""
        viewer_id = UserId(UUID(request.viewer_id))
        other_id = UserId(UUID(request.other_id))

        status = await self.connection_service.connection_status(viewer_id, other_id)
        can_message = await self.chat_gate_service.can_message(viewer_id, other_id)

        return GetConnectionStatusResponse(
            other_id=request.other_id, status=status, can_message=can_message
        )
