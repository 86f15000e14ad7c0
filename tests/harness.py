"""Test harness for unit, integration and API tests.

Integration tests assume a PostgreSQL instance is reachable and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from ombud.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            vote_service = await unit_env.get(VoteService)
            result = await vote_service.cast_vote(complaint_id, user_id, "up")
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_app_container_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding an app-scoped test container.

    API tests hand this container to ``create_app`` so every request in a
    test shares the same in-memory repositories.
    """

    @pytest_asyncio.fixture
    async def _app_container():
        container = build_test_container(unmock=unmock or set())
        yield container
        await container.close()

    return _app_container
