"""Test harness for unit and E2E tests.

Settings are loaded from environment variables; conftest.py points the
persistence component at the in-memory backend.
"""

from typing import Mapping

import pytest_asyncio

from adages.util.di import Component
from tests.di import build_test_container


def create_env_fixture(variants: Mapping[Component, str] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with the requested component variants
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        variants: Implementation per component (default: memory persistence)

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture({"persistence": "postgres"})

        @pytest.mark.asyncio
        async def test_stats(unit_env):
            service = await unit_env.get(CommendationService)
            stats = await service.get_commendation_stats(user_id)
            assert stats.votes.net == 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(variants)

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
