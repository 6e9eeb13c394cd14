"""Send message use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from grifi.application.usecase.chat.common import MessageItem, to_message_item
from grifi.domain.service import ChatService
from grifi.domain.value import UserId


class SendMessageRequest(BaseModel):
    """Send message request."""

    sender_id: str  # User ID from auth
    receiver_id: str
    content: str
    client_id: Optional[str] = Field(default=None, max_length=100)


class SendMessageResponse(BaseModel):
    """Send message response."""

    message: MessageItem


class SendMessageUseCase:
    """Use case for sending a direct message to a connected member."""

    def __init__(self, chat_service: ChatService) -> None:
        """Initialize send message use case.

        Args:
            chat_service: Chat domain service
        """
        self.chat_service = chat_service

    async def execute(self, request: SendMessageRequest) -> SendMessageResponse:
        """Execute send message flow.

        Raises:
            ValidationError: If content is blank or too long
            ForbiddenError: If the pair is not connected
        """
        message = await self.chat_service.send_message(
            sender_id=UserId(UUID(request.sender_id)),
            receiver_id=UserId(UUID(request.receiver_id)),
            content=request.content,
            client_id=request.client_id,
        )
        return SendMessageResponse(message=to_message_item(message))
