"""Chat use cases."""

from grifi.application.usecase.chat.common import MessageItem, to_message_item
from grifi.application.usecase.chat.get_conversation import (
    GetConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
)
from grifi.application.usecase.chat.mark_read import (
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from grifi.application.usecase.chat.send_message import (
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)

__all__ = [
    "GetConversationRequest",
    "GetConversationResponse",
    "GetConversationUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
    "MessageItem",
    "SendMessageRequest",
    "SendMessageResponse",
    "SendMessageUseCase",
    "to_message_item",
]
