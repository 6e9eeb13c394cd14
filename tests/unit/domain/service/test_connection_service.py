"""Unit tests for ConnectionService."""

from uuid import uuid4

import pytest

from grifi.domain.repository import CollabRequestRepository
from grifi.domain.service import ConnectionService
from grifi.domain.value import ConnectionStatus, RequestStatus, UserId
from tests.conftest import make_request, minutes_ago
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestConnectionStatus:
    """Tests for connection_status."""

    @pytest.mark.asyncio
    async def test_no_requests_is_none(self, unit_env):
        service = await unit_env.get(ConnectionService)

        result = await service.connection_status(UserId(uuid4()), UserId(uuid4()))

        assert result == ConnectionStatus.NONE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "stored, expected",
        [
            (RequestStatus.PENDING, ConnectionStatus.PENDING),
            (RequestStatus.ACCEPTED, ConnectionStatus.ACCEPTED),
            (RequestStatus.REJECTED, ConnectionStatus.REJECTED),
            (RequestStatus.COMPLETED, ConnectionStatus.ACCEPTED),
        ],
    )
    async def test_status_follows_request(self, unit_env, stored, expected):
        # Arrange
        service = await unit_env.get(ConnectionService)
        request_repo = await unit_env.get(CollabRequestRepository)
        a, b = UserId(uuid4()), UserId(uuid4())
        await make_request(request_repo, a, b, status=stored)

        # Act
        result = await service.connection_status(a, b)

        # Assert
        assert result == expected

    @pytest.mark.asyncio
    async def test_symmetric_in_arguments(self, unit_env):
        # Arrange
        service = await unit_env.get(ConnectionService)
        request_repo = await unit_env.get(CollabRequestRepository)
        a, b = UserId(uuid4()), UserId(uuid4())
        await make_request(request_repo, a, b, status=RequestStatus.ACCEPTED)

        # Act & Assert
        assert await service.connection_status(a, b) == ConnectionStatus.ACCEPTED
        assert await service.connection_status(b, a) == ConnectionStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_most_recent_request_wins(self, unit_env):
        """A new pending request after a rejection shows as pending."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        request_repo = await unit_env.get(CollabRequestRepository)
        a, b = UserId(uuid4()), UserId(uuid4())
        await make_request(
            request_repo, a, b, status=RequestStatus.REJECTED, created_at=minutes_ago(60)
        )
        await make_request(
            request_repo, b, a, status=RequestStatus.PENDING, created_at=minutes_ago(5)
        )

        # Act
        result = await service.connection_status(a, b)

        # Assert
        assert result == ConnectionStatus.PENDING

    @pytest.mark.asyncio
    async def test_third_party_requests_ignored(self, unit_env):
        # Arrange
        service = await unit_env.get(ConnectionService)
        request_repo = await unit_env.get(CollabRequestRepository)
        a, b, c = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        await make_request(request_repo, a, c, status=RequestStatus.ACCEPTED)
        await make_request(request_repo, c, b, status=RequestStatus.ACCEPTED)

        # Act
        result = await service.connection_status(a, b)

        # Assert
        assert result == ConnectionStatus.NONE

    @pytest.mark.asyncio
    async def test_same_member_is_none(self, unit_env):
        service = await unit_env.get(ConnectionService)
        a = UserId(uuid4())

        assert await service.connection_status(a, a) == ConnectionStatus.NONE

    @pytest.mark.asyncio
    async def test_guest_inquiries_do_not_connect(self, unit_env):
        # Arrange
        service = await unit_env.get(ConnectionService)
        request_repo = await unit_env.get(CollabRequestRepository)
        receiver = UserId(uuid4())
        await make_request(request_repo, None, receiver, status=RequestStatus.REJECTED)

        # Act
        result = await service.connection_status(receiver, UserId(uuid4()))

        # Assert
        assert result == ConnectionStatus.NONE


class TestListConnections:
    """Tests for list_connections."""

    @pytest.mark.asyncio
    async def test_lists_accepted_partners_once(self, unit_env):
        # Arrange
        service = await unit_env.get(ConnectionService)
        request_repo = await unit_env.get(CollabRequestRepository)
        me = UserId(uuid4())
        friend, brand, stranger = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        await make_request(request_repo, me, friend, status=RequestStatus.ACCEPTED)
        await make_request(request_repo, friend, me, status=RequestStatus.ACCEPTED)
        await make_request(request_repo, brand, me, status=RequestStatus.ACCEPTED)
        await make_request(request_repo, stranger, me, status=RequestStatus.PENDING)
        await make_request(request_repo, None, me, status=RequestStatus.ACCEPTED)

        # Act
        result = await service.list_connections(me)

        # Assert
        assert sorted(result, key=str) == sorted([friend, brand], key=str)
