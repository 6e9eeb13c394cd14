"""Get collaboration request use case."""

from uuid import UUID

from pydantic import BaseModel

from grifi.application.usecase.collab.common import (
    CollabRequestItem,
    partner_profile,
    to_item,
    unknown_partner,
)
from grifi.domain.error import ForbiddenError, NotFoundError
from grifi.domain.service import CollabRequestService, ProfileService
from grifi.domain.value import CollabRequestId, UserId


class GetCollabRequestRequest(BaseModel):
    """Get collaboration request request."""

    request_id: str
    viewer_id: str  # User ID from auth


class GetCollabRequestResponse(BaseModel):
    """Get collaboration request response."""

    request: CollabRequestItem


class GetCollabRequestUseCase:
    """Use case for viewing a single request as one of its parties."""

    def __init__(
        self,
        collab_request_service: CollabRequestService,
        profile_service: ProfileService,
    ) -> None:
        self.collab_request_service = collab_request_service
        self.profile_service = profile_service

    async def execute(self, request: GetCollabRequestRequest) -> GetCollabRequestResponse:
        """Execute get collaboration request flow.

        Raises:
            NotFoundError: If the request does not exist
            ForbiddenError: If the viewer is neither sender nor receiver
        """
        request_id = CollabRequestId(UUID(request.request_id))
        viewer_id = UserId(UUID(request.viewer_id))

        collab = await self.collab_request_service.get(request_id)
        if not collab.involves(viewer_id):
            raise ForbiddenError("CollabRequest", request.request_id, request.viewer_id)

        partner = None
        partner_id = collab.partner_of(viewer_id)
        if partner_id is not None:
            try:
                partner = partner_profile(await self.profile_service.get_by_id(partner_id))
            except NotFoundError:
                partner = unknown_partner(partner_id)

        return GetCollabRequestResponse(request=to_item(collab, partner))
