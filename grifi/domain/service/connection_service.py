"""Connection read model.

A connection is never stored; it is the status of the most recent request
between exactly two members.
"""

import logfire

from grifi.domain.repository import CollabRequestRepository
from grifi.domain.value import ConnectionStatus, RequestStatus, UserId

from .base import Service

_STATUS_TO_CONNECTION = {
    RequestStatus.PENDING: ConnectionStatus.PENDING,
    RequestStatus.ACCEPTED: ConnectionStatus.ACCEPTED,
    RequestStatus.REJECTED: ConnectionStatus.REJECTED,
    # A completed collaboration still links the pair
    RequestStatus.COMPLETED: ConnectionStatus.ACCEPTED,
}


class ConnectionService(Service):
    """Domain service deriving relationship status between members."""

    def __init__(self, collab_request_repository: CollabRequestRepository) -> None:
        """Initialize connection service.

        Args:
            collab_request_repository: Collab request repository
        """
        self.collab_request_repository = collab_request_repository

    async def connection_status(self, a: UserId, b: UserId) -> ConnectionStatus:
        """Status of the most recent request between exactly a and b.

        Symmetric in its arguments. Requests with third parties are ignored.

        Args:
            a: One member
            b: The other member

        Returns:
            Derived connection status, NONE if the pair never interacted
        """
        if a == b:
            return ConnectionStatus.NONE

        with logfire.span(
            "connection_service.connection_status", a=str(a), b=str(b)
        ):
            requests = await self.collab_request_repository.find_between(a, b)
            if not requests:
                return ConnectionStatus.NONE

            # Ties on created_at resolve by id so both directions agree
            latest = max(requests, key=lambda r: (r.created_at, str(r.id)))
            status = _STATUS_TO_CONNECTION[latest.status]
            logfire.info(
                "Connection status derived",
                a=str(a),
                b=str(b),
                status=status.value,
                request_count=len(requests),
            )
            return status

    async def list_connections(self, user_id: UserId) -> list[UserId]:
        """Members connected to user_id through an accepted request."""
        with logfire.span("connection_service.list_connections", user_id=str(user_id)):
            partner_ids = await self.collab_request_repository.find_partner_ids(
                user_id, RequestStatus.ACCEPTED
            )
            return list(dict.fromkeys(partner_ids))
