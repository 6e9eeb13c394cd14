"""Get collaboration inbox use case.

Builds the collaborations dashboard: pending requests addressed to the user,
pending requests the user sent, and accepted requests in either direction,
each annotated with the other party's profile.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel

from grifi.application.usecase.collab.common import (
    CollabRequestItem,
    partner_profile,
    to_item,
    unknown_partner,
)
from grifi.domain.model import CollabRequest
from grifi.domain.service import CollabRequestService, ProfileService
from grifi.domain.value import RequestStatus, UserId


class GetInboxRequest(BaseModel):
    """Get inbox request."""

    user_id: str  # User ID from auth
    limit: int = 100


class GetInboxResponse(BaseModel):
    """Get inbox response."""

    incoming_pending: list[CollabRequestItem]
    outgoing_pending: list[CollabRequestItem]
    active: list[CollabRequestItem]


class GetInboxUseCase:
    """Use case for the collaborations dashboard."""

    def __init__(
        self,
        collab_request_service: CollabRequestService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize get inbox use case.

        Args:
            collab_request_service: Collaboration request domain service
            profile_service: Profile domain service
        """
        self.collab_request_service = collab_request_service
        self.profile_service = profile_service

    async def execute(self, request: GetInboxRequest) -> GetInboxResponse:
        """Execute get inbox flow.

        Partners without a profile are shown as "Unknown User". Guest
        inquiries have no partner; their contact is on the item.
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_inbox", user_id=request.user_id):
            incoming = await self.collab_request_service.list_by_receiver(
                user_id, limit=request.limit
            )
            outgoing = await self.collab_request_service.list_by_sender(
                user_id, limit=request.limit
            )

            partner_ids = {
                r.partner_of(user_id) for r in incoming + outgoing
            } - {None}
            profiles = await self.profile_service.get_many(list(partner_ids))

            def item(collab: CollabRequest) -> CollabRequestItem:
                partner_id = collab.partner_of(user_id)
                if partner_id is None:
                    return to_item(collab)
                profile = profiles.get(partner_id)
                partner = (
                    partner_profile(profile) if profile else unknown_partner(partner_id)
                )
                return to_item(collab, partner)

            return GetInboxResponse(
                incoming_pending=[
                    item(r) for r in incoming if r.status == RequestStatus.PENDING
                ],
                outgoing_pending=[
                    item(r) for r in outgoing if r.status == RequestStatus.PENDING
                ],
                active=[
                    item(r)
                    for r in incoming + outgoing
                    if r.status == RequestStatus.ACCEPTED
                ],
            )
