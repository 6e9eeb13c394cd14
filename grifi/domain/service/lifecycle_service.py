"""Collaboration request lifecycle service."""

import logfire

from grifi.domain.error import ForbiddenError, InvalidTransitionError
from grifi.domain.model import CollabRequest
from grifi.domain.model.lifecycle import check_transition
from grifi.domain.value import CollabRequestId, RequestStatus, UserId

from .base import Service
from .collab_request_service import CollabRequestService


class CollabLifecycleService(Service):
    """Applies receiver responses to pending requests.

    Accepting writes the status and nothing else: connections are derived
    from the stored requests, never materialized.
    """

    def __init__(self, collab_request_service: CollabRequestService) -> None:
        """Initialize lifecycle service.

        Args:
            collab_request_service: Collab request domain service
        """
        self.collab_request_service = collab_request_service

    async def accept(
        self, request_id: CollabRequestId, actor_id: UserId | None
    ) -> CollabRequest:
        """Accept a pending request as its receiver.

        Raises:
            NotFoundError: If request not found
            ForbiddenError: If actor is not the receiver
            InvalidTransitionError: If request is not pending or is a guest inquiry
            ConcurrencyConflictError: If another response won the race
        """
        return await self._respond(request_id, actor_id, RequestStatus.ACCEPTED)

    async def reject(
        self, request_id: CollabRequestId, actor_id: UserId | None
    ) -> CollabRequest:
        """Reject a pending request as its receiver.

        Raises:
            NotFoundError: If request not found
            ForbiddenError: If actor is not the receiver
            InvalidTransitionError: If request is not pending
            ConcurrencyConflictError: If another response won the race
        """
        return await self._respond(request_id, actor_id, RequestStatus.REJECTED)

    async def _respond(
        self,
        request_id: CollabRequestId,
        actor_id: UserId | None,
        target: RequestStatus,
    ) -> CollabRequest:
        with logfire.span(
            "collab_lifecycle.respond",
            request_id=str(request_id),
            actor_id=str(actor_id) if actor_id else None,
            target=target.value,
        ):
            request = await self.collab_request_service.get(request_id)

            try:
                check_transition(request, actor_id, target)
            except (ForbiddenError, InvalidTransitionError) as e:
                logfire.warn(
                    "Collab transition refused",
                    request_id=str(request_id),
                    status=request.status.value,
                    target=target.value,
                    error=str(e),
                )
                raise

            return await self.collab_request_service.update_status(
                request_id, target, expected_status=RequestStatus.PENDING
            )
