"""Collaboration request state machine.

    pending --accept--> accepted
    pending --reject--> rejected

Only the receiver may move a request and only while it is pending. There is
no way back from a terminal state. ``completed`` is reserved and unreachable.

Campaign applications follow the same shape with the brand as the deciding
party (pending -> approved | rejected).
"""

from grifi.domain.error import ForbiddenError, InvalidTransitionError
from grifi.domain.model.campaign import CampaignApplication
from grifi.domain.model.collab_request import CollabRequest
from grifi.domain.value import ApplicationStatus, RequestStatus, UserId

TERMINAL_STATUSES = frozenset(
    {RequestStatus.ACCEPTED, RequestStatus.REJECTED, RequestStatus.COMPLETED}
)

# Targets reachable through accept/reject
RESPONSE_STATUSES = frozenset({RequestStatus.ACCEPTED, RequestStatus.REJECTED})

DECISION_STATUSES = frozenset({ApplicationStatus.APPROVED, ApplicationStatus.REJECTED})


def check_transition(
    request: CollabRequest, actor_id: UserId | None, target: RequestStatus
) -> None:
    """Validate that actor_id may move request to target.

    The actor check runs first, so a non-receiver always gets ForbiddenError
    whatever the current status.

    Raises:
        ForbiddenError: If actor is not the receiver
        InvalidTransitionError: If request is not pending, target is not a
            response status, or a guest request would be accepted
    """
    if actor_id is None or actor_id != request.receiver_id:
        raise ForbiddenError("CollabRequest", str(request.id), _str(actor_id))

    if request.status != RequestStatus.PENDING or target not in RESPONSE_STATUSES:
        raise InvalidTransitionError(
            "CollabRequest", str(request.id), request.status.value, target.value
        )

    # Guests have no account to chat with; they are answered out of band
    if request.is_guest and target == RequestStatus.ACCEPTED:
        raise InvalidTransitionError(
            "CollabRequest", str(request.id), request.status.value, target.value
        )


def can_transition(
    request: CollabRequest, actor_id: UserId | None, target: RequestStatus
) -> bool:
    """Non-raising variant of check_transition, for rendering actions."""
    try:
        check_transition(request, actor_id, target)
    except (ForbiddenError, InvalidTransitionError):
        return False
    return True


def check_decision(
    application: CampaignApplication,
    actor_id: UserId | None,
    target: ApplicationStatus,
) -> None:
    """Validate that actor_id (the campaign's brand) may decide an application.

    Raises:
        ForbiddenError: If actor is not the campaign's brand
        InvalidTransitionError: If application is not pending or target is invalid
    """
    if actor_id is None or actor_id != application.brand_id:
        raise ForbiddenError("CampaignApplication", str(application.id), _str(actor_id))

    if (
        application.status != ApplicationStatus.PENDING
        or target not in DECISION_STATUSES
    ):
        raise InvalidTransitionError(
            "CampaignApplication",
            str(application.id),
            application.status.value,
            target.value,
        )


def _str(value: UserId | None) -> str | None:
    return str(value) if value is not None else None
