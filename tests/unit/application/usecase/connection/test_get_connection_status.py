"""Unit tests for connection use cases."""

from uuid import uuid4

import pytest

from grifi.application.usecase.connection import (
    GetConnectionStatusRequest,
    GetConnectionStatusUseCase,
    ListConnectionsRequest,
    ListConnectionsUseCase,
)
from grifi.domain.repository import CollabRequestRepository
from grifi.domain.value import ConnectionStatus, RequestStatus, UserId
from tests.conftest import make_request
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetConnectionStatusUseCase:
    """Tests for GetConnectionStatusUseCase."""

    @pytest.mark.asyncio
    async def test_pending_request_cannot_message(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetConnectionStatusUseCase)
        request_repo = await unit_env.get(CollabRequestRepository)
        a, b = UserId(uuid4()), UserId(uuid4())
        await make_request(request_repo, a, b)

        # Act
        response = await use_case.execute(
            GetConnectionStatusRequest(viewer_id=str(b), other_id=str(a))
        )

        # Assert
        assert response.status == ConnectionStatus.PENDING
        assert not response.can_message

    @pytest.mark.asyncio
    async def test_accepted_request_can_message(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetConnectionStatusUseCase)
        request_repo = await unit_env.get(CollabRequestRepository)
        a, b = UserId(uuid4()), UserId(uuid4())
        await make_request(request_repo, a, b, status=RequestStatus.ACCEPTED)

        # Act
        response = await use_case.execute(
            GetConnectionStatusRequest(viewer_id=str(a), other_id=str(b))
        )

        # Assert
        assert response.other_id == str(b)
        assert response.status == ConnectionStatus.ACCEPTED
        assert response.can_message


class TestListConnectionsUseCase:
    """Tests for ListConnectionsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_connection_ids(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListConnectionsUseCase)
        request_repo = await unit_env.get(CollabRequestRepository)
        me, friend = UserId(uuid4()), UserId(uuid4())
        await make_request(request_repo, friend, me, status=RequestStatus.ACCEPTED)

        # Act
        response = await use_case.execute(ListConnectionsRequest(user_id=str(me)))

        # Assert
        assert response.connection_ids == [str(friend)]
        assert response.total == 1
