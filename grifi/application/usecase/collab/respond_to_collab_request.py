"""Respond to collaboration request use case."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel

from grifi.application.usecase.collab.common import CollabRequestItem, to_item
from grifi.domain.service import CollabLifecycleService
from grifi.domain.value import CollabRequestId, UserId


class Answer(str, Enum):
    """Receiver's answer to a request."""

    ACCEPT = "accept"
    REJECT = "reject"


class RespondToCollabRequestRequest(BaseModel):
    """Respond to collaboration request request."""

    request_id: str
    actor_id: str  # User ID from auth
    answer: Answer


class RespondToCollabRequestResponse(BaseModel):
    """Respond to collaboration request response."""

    request: CollabRequestItem


class RespondToCollabRequestUseCase:
    """Use case for the receiver accepting or rejecting a pending request."""

    def __init__(self, lifecycle_service: CollabLifecycleService) -> None:
        """Initialize respond use case.

        Args:
            lifecycle_service: Lifecycle domain service
        """
        self.lifecycle_service = lifecycle_service

    async def execute(
        self, request: RespondToCollabRequestRequest
    ) -> RespondToCollabRequestResponse:
        """Execute respond flow.

        Raises:
            NotFoundError: If the request does not exist
            ForbiddenError: If the actor is not the receiver
            InvalidTransitionError: If the request is no longer pending, or
                a guest inquiry is being accepted
            ConcurrencyConflictError: If another response won the race
        """
        request_id = CollabRequestId(UUID(request.request_id))
        actor_id = UserId(UUID(request.actor_id))

        if request.answer == Answer.ACCEPT:
            updated = await self.lifecycle_service.accept(request_id, actor_id)
        else:
            updated = await self.lifecycle_service.reject(request_id, actor_id)

        return RespondToCollabRequestResponse(request=to_item(updated))
