"""In-memory collaboration request repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from grifi.domain.model.collab_request import CollabRequest
from grifi.domain.repository.collab_request import CollabRequestRepository
from grifi.domain.value import CollabRequestId, RequestStatus, UserId


def _newest_first(requests: list[CollabRequest]) -> list[CollabRequest]:
    return sorted(requests, key=lambda r: (r.created_at, str(r.id)), reverse=True)


class InMemoryCollabRequestRepository(CollabRequestRepository):
    """In-memory implementation of CollabRequestRepository for testing."""

    def __init__(self) -> None:
        self._requests: dict[CollabRequestId, CollabRequest] = {}

    async def save(self, request: CollabRequest) -> CollabRequest:
        """Insert a new request."""
        if request.id in self._requests:
            raise IntegrityError(
                "Duplicate collab request id",
                params=None,
                orig=Exception("UNIQUE constraint failed"),
            )
        if request.sender_id is not None and request.sender_id == request.receiver_id:
            raise IntegrityError(
                "Sender and receiver must differ",
                params=None,
                orig=Exception("CHECK constraint failed: ck_collab_requests_not_self"),
            )
        self._requests[request.id] = request
        return request

    async def find_by_id(self, request_id: CollabRequestId) -> Optional[CollabRequest]:
        """Find a request by ID."""
        return self._requests.get(request_id)

    async def update_status(
        self,
        request_id: CollabRequestId,
        new_status: RequestStatus,
        expected_status: RequestStatus,
        responded_at: datetime,
    ) -> Optional[CollabRequest]:
        """Conditionally change a request's status.

        No await between the check and the write, so concurrent callers on
        one event loop cannot both pass the check.
        """
        request = self._requests.get(request_id)
        if request is None or request.status != expected_status:
            return None

        updated = request.model_copy(
            update={"status": new_status, "responded_at": responded_at}
        )
        self._requests[request_id] = updated
        return updated

    async def find_by_receiver(
        self,
        receiver_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """Find requests addressed to a user, newest first."""
        requests = [
            r
            for r in self._requests.values()
            if r.receiver_id == receiver_id and (status is None or r.status == status)
        ]
        return _newest_first(requests)[offset : offset + limit]

    async def find_by_sender(
        self,
        sender_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """Find requests sent by a user, newest first."""
        requests = [
            r
            for r in self._requests.values()
            if r.sender_id == sender_id and (status is None or r.status == status)
        ]
        return _newest_first(requests)[offset : offset + limit]

    async def find_between(self, a: UserId, b: UserId) -> list[CollabRequest]:
        """Find requests between exactly a and b, newest first."""
        return _newest_first([r for r in self._requests.values() if r.is_between(a, b)])

    async def exists_with_status_between(
        self, a: UserId, b: UserId, status: RequestStatus
    ) -> bool:
        """Check whether any request between a and b has the given status."""
        return any(
            r.is_between(a, b) and r.status == status for r in self._requests.values()
        )

    async def find_partner_ids(
        self, user_id: UserId, status: RequestStatus
    ) -> list[UserId]:
        """Find distinct counterparties of a user's requests with a status."""
        partners: list[UserId] = []
        for request in _newest_first(list(self._requests.values())):
            if request.is_guest or request.status != status:
                continue
            if not request.involves(user_id):
                continue
            partner = request.partner_of(user_id)
            if partner is not None and partner not in partners:
                partners.append(partner)
        return partners
