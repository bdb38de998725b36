"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from mindful.config import Settings
from mindful.util.di import Component
from mindful.util.jwt import create_token
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        async def test_create_post(unit_env):
            repo = await unit_env.get(PostRepository)
            post = await repo.save(Post(...))
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding a TestClient over a test container.

    Every request of one client shares the container, so data written by one
    call is visible to the next.
    """

    @pytest.fixture
    def _client():
        from mindful.interface.api.app import create_app

        container = build_test_container(unmock=unmock or set())
        app = create_app(container=container)
        with TestClient(app) as client:
            yield client

    return _client


def auth_headers(
    user_id: str,
    email: str | None = None,
    first_name: str | None = None,
) -> dict[str, str]:
    """Bearer header for a token signed with the configured secret."""
    token = create_token(
        user_id,
        Settings().auth,
        email=email,
        first_name=first_name,
    )
    return {"Authorization": f"Bearer {token}"}
