"""Collaboration request repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from grifi.domain.model.collab_request import CollabRequest
from grifi.domain.value import CollabRequestId, RequestStatus, UserId


class CollabRequestRepository(ABC):
    """Repository for CollabRequest entity.

    Defines the contract for request persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, request: CollabRequest) -> CollabRequest:
        """Insert a new request.

        Args:
            request: The request to store

        Returns:
            The stored request
        """
        pass

    @abstractmethod
    async def find_by_id(self, request_id: CollabRequestId) -> Optional[CollabRequest]:
        """Find a request by ID.

        Args:
            request_id: The request's unique identifier

        Returns:
            The request if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        request_id: CollabRequestId,
        new_status: RequestStatus,
        expected_status: RequestStatus,
        responded_at: datetime,
    ) -> Optional[CollabRequest]:
        """Conditionally change a request's status.

        The write only applies if the stored status still equals
        expected_status, so two racing transitions cannot both succeed.

        Args:
            request_id: Request to update
            new_status: Status to write
            expected_status: Status the request must currently have
            responded_at: Time of the transition

        Returns:
            The updated request, or None if the request is missing or its
            status no longer matches expected_status
        """
        pass

    @abstractmethod
    async def find_by_receiver(
        self,
        receiver_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """Find requests addressed to a user, newest first.

        Args:
            receiver_id: Receiving user
            status: Optional status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of requests
        """
        pass

    @abstractmethod
    async def find_by_sender(
        self,
        sender_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """Find requests sent by a user, newest first.

        Args:
            sender_id: Sending user
            status: Optional status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of requests
        """
        pass

    @abstractmethod
    async def find_between(self, a: UserId, b: UserId) -> list[CollabRequest]:
        """Find requests between exactly a and b (either direction), newest first.

        Args:
            a: One party
            b: The other party

        Returns:
            List of requests
        """
        pass

    @abstractmethod
    async def exists_with_status_between(
        self, a: UserId, b: UserId, status: RequestStatus
    ) -> bool:
        """Check whether any request between a and b has the given status.

        Args:
            a: One party
            b: The other party
            status: Status to look for

        Returns:
            True if such a request exists
        """
        pass

    @abstractmethod
    async def find_partner_ids(
        self, user_id: UserId, status: RequestStatus
    ) -> list[UserId]:
        """Find distinct counterparties of a user's requests with a status.

        Guest requests have no counterparty and are skipped.

        Args:
            user_id: User whose partners to find
            status: Status filter

        Returns:
            List of partner user IDs
        """
        pass
