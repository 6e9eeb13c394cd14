"""Integration tests for PostgresCollabRequestRepository.

Run with ``pytest -m integration`` against a migrated database.
"""

from uuid import uuid4

import pytest

from grifi.domain.error import InvalidTransitionError
from grifi.domain.model import CollabRequest
from grifi.domain.repository import CollabRequestRepository, ProfileRepository
from grifi.domain.service import CollabLifecycleService, ConnectionService
from grifi.domain.value import (
    CollabRequestId,
    ConnectionStatus,
    ContactHandle,
    RequestStatus,
)
from tests.conftest import make_profile, make_request, minutes_ago
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


class TestCollabRequestRepositoryIntegration:
    """Database round trips for collaboration requests."""

    @pytest.mark.asyncio
    async def test_guest_contact_survives_round_trip(self, integration_env):
        """Guest contact is stored inside the message column and read back."""
        # Arrange
        request_repo = await integration_env.get(CollabRequestRepository)
        profile_repo = await integration_env.get(ProfileRepository)
        receiver = await make_profile(profile_repo)
        request = CollabRequest(
            id=CollabRequestId(uuid4()),
            sender_id=None,
            receiver_id=receiver.id,
            message="Interested in sponsorship",
            guest_contact=ContactHandle("guest@example.com"),
        )

        # Act
        await request_repo.save(request)
        loaded = await request_repo.find_by_id(request.id)

        # Assert
        assert loaded.guest_contact == ContactHandle("guest@example.com")
        assert loaded.message == "Interested in sponsorship"

    @pytest.mark.asyncio
    async def test_conditional_update_only_once(self, integration_env):
        # Arrange
        request_repo = await integration_env.get(CollabRequestRepository)
        profile_repo = await integration_env.get(ProfileRepository)
        sender = await make_profile(profile_repo)
        receiver = await make_profile(profile_repo)
        request = await make_request(request_repo, sender.id, receiver.id)

        # Act
        first = await request_repo.update_status(
            request.id, RequestStatus.ACCEPTED, RequestStatus.PENDING, minutes_ago(0)
        )
        second = await request_repo.update_status(
            request.id, RequestStatus.REJECTED, RequestStatus.PENDING, minutes_ago(0)
        )

        # Assert
        assert first.status == RequestStatus.ACCEPTED
        assert second is None

    @pytest.mark.asyncio
    async def test_connection_uses_latest_request(self, integration_env):
        # Arrange
        connection_service = await integration_env.get(ConnectionService)
        request_repo = await integration_env.get(CollabRequestRepository)
        profile_repo = await integration_env.get(ProfileRepository)
        a = await make_profile(profile_repo)
        b = await make_profile(profile_repo)
        await make_request(
            request_repo, a.id, b.id, RequestStatus.REJECTED, minutes_ago(30)
        )
        await make_request(
            request_repo, b.id, a.id, RequestStatus.ACCEPTED, minutes_ago(1)
        )

        # Act
        status = await connection_service.connection_status(a.id, b.id)

        # Assert
        assert status == ConnectionStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_lifecycle_rejects_second_response(self, integration_env):
        # Arrange
        lifecycle = await integration_env.get(CollabLifecycleService)
        request_repo = await integration_env.get(CollabRequestRepository)
        profile_repo = await integration_env.get(ProfileRepository)
        sender = await make_profile(profile_repo)
        receiver = await make_profile(profile_repo)
        request = await make_request(request_repo, sender.id, receiver.id)

        await lifecycle.accept(request.id, receiver.id)

        # Act & Assert
        with pytest.raises(InvalidTransitionError):
            await lifecycle.reject(request.id, receiver.id)

        loaded = await request_repo.find_by_id(request.id)
        assert loaded.status == RequestStatus.ACCEPTED
        assert loaded.responded_at is not None
