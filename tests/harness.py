"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
Integration tests assume PostgreSQL is reachable at DATABASE__URL with
migrations applied.
"""

import pytest_asyncio

from grifi.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    unmocking and yields a request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything in memory
        unit_env = create_env_fixture()

        # Integration tests - real PostgreSQL
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_accept(unit_env):
            service = await unit_env.get(CollabLifecycleService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
