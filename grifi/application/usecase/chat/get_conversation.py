"""Get conversation use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.application.usecase.chat.common import MessageItem, to_message_item
from grifi.domain.service import ChatService
from grifi.domain.value import UserId


class GetConversationRequest(BaseModel):
    """Get conversation request."""

    viewer_id: str  # User ID from auth
    partner_id: str


class GetConversationResponse(BaseModel):
    """Get conversation response."""

    partner_id: str
    messages: list[MessageItem]


class GetConversationUseCase:
    """Use case for loading the message history with a partner."""

    def __init__(self, chat_service: ChatService) -> None:
        self.chat_service = chat_service

    async def execute(self, request: GetConversationRequest) -> GetConversationResponse:
        """Execute get conversation flow, oldest message first.

        Raises:
            ForbiddenError: If the pair is not connected
        """
        messages = await self.chat_service.get_conversation(
            UserId(UUID(request.viewer_id)), UserId(UUID(request.partner_id))
        )
        return GetConversationResponse(
            partner_id=request.partner_id,
            messages=[to_message_item(m) for m in messages],
        )
