"""Mark conversation read use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.domain.service import ChatService
from grifi.domain.value import UserId


class MarkReadRequest(BaseModel):
    """Mark read request."""

    viewer_id: str  # User ID from auth
    partner_id: str


class MarkReadResponse(BaseModel):
    """Mark read response."""

    updated: int


class MarkReadUseCase:
    """Use case for marking a partner's messages as read."""

    def __init__(self, chat_service: ChatService) -> None:
        self.chat_service = chat_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        updated = await self.chat_service.mark_read(
            UserId(UUID(request.viewer_id)), UserId(UUID(request.partner_id))
        )
        return MarkReadResponse(updated=updated)
