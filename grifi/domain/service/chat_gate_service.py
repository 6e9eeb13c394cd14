"""Direct messaging gate."""

import logfire

from grifi.domain.error import ForbiddenError
from grifi.domain.repository import (
    CampaignApplicationRepository,
    CollabRequestRepository,
)
from grifi.domain.value import RequestStatus, UserId

from .base import Service


class ChatGateService(Service):
    """Decides whether two members may message each other.

    Messaging opens once the pair has an accepted collaboration request, or
    once a brand approved the other member's campaign application.
    """

    def __init__(
        self,
        collab_request_repository: CollabRequestRepository,
        application_repository: CampaignApplicationRepository,
    ) -> None:
        """Initialize chat gate service.

        Args:
            collab_request_repository: Collab request repository
            application_repository: Campaign application repository
        """
        self.collab_request_repository = collab_request_repository
        self.application_repository = application_repository

    async def can_message(self, a: UserId, b: UserId) -> bool:
        """Whether a and b may open a direct conversation."""
        if a == b:
            return False

        with logfire.span("chat_gate.can_message", a=str(a), b=str(b)):
            if await self.collab_request_repository.exists_with_status_between(
                a, b, RequestStatus.ACCEPTED
            ):
                return True
            allowed = await self.application_repository.exists_approved_between(a, b)
            logfire.info(
                "Chat gate evaluated", a=str(a), b=str(b), allowed=allowed
            )
            return allowed

    async def ensure_can_message(self, a: UserId, b: UserId) -> None:
        """Raise ForbiddenError unless a may message b."""
        if not await self.can_message(a, b):
            logfire.warn("Chat gate closed", a=str(a), b=str(b))
            raise ForbiddenError("Conversation", str(b), str(a))
