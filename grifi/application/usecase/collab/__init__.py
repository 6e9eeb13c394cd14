"""Collaboration request use cases."""

from grifi.application.usecase.collab.common import (
    CollabRequestItem,
    GuestContact,
    PartnerProfile,
)
from grifi.application.usecase.collab.create_collab_request import (
    CreateCollabRequestRequest,
    CreateCollabRequestResponse,
    CreateCollabRequestUseCase,
)
from grifi.application.usecase.collab.create_guest_inquiry import (
    CreateGuestInquiryRequest,
    CreateGuestInquiryResponse,
    CreateGuestInquiryUseCase,
)
from grifi.application.usecase.collab.get_collab_request import (
    GetCollabRequestRequest,
    GetCollabRequestResponse,
    GetCollabRequestUseCase,
)
from grifi.application.usecase.collab.get_inbox import (
    GetInboxRequest,
    GetInboxResponse,
    GetInboxUseCase,
)
from grifi.application.usecase.collab.list_collab_requests import (
    Box,
    ListCollabRequestsRequest,
    ListCollabRequestsResponse,
    ListCollabRequestsUseCase,
)
from grifi.application.usecase.collab.respond_to_collab_request import (
    RespondToCollabRequestRequest,
    RespondToCollabRequestResponse,
    RespondToCollabRequestUseCase,
    Answer,
)

__all__ = [
    "Answer",
    "Box",
    "CollabRequestItem",
    "CreateCollabRequestRequest",
    "CreateCollabRequestResponse",
    "CreateCollabRequestUseCase",
    "CreateGuestInquiryRequest",
    "CreateGuestInquiryResponse",
    "CreateGuestInquiryUseCase",
    "GetCollabRequestRequest",
    "GetCollabRequestResponse",
    "GetCollabRequestUseCase",
    "GetInboxRequest",
    "GetInboxResponse",
    "GetInboxUseCase",
    "GuestContact",
    "ListCollabRequestsRequest",
    "ListCollabRequestsResponse",
    "ListCollabRequestsUseCase",
    "PartnerProfile",
    "RespondToCollabRequestRequest",
    "RespondToCollabRequestResponse",
    "RespondToCollabRequestUseCase",
]
