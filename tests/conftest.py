"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test configuration and markers
- A fake AgentLink API served through httpx.MockTransport
- A mocked API client for command and query handler tests
- Test settings
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from _pytest.config import Config

from agentlink.application.settings import Settings
from agentlink.infrastructure import AgentLinkApiClient
from tests.fixtures.fake_api import BASE_URL, FakeAgentLinkApi

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "asyncio: Async tests")
    config.addinivalue_line("markers", "auth: Authentication tests")
    config.addinivalue_line("markers", "command: Command handler tests")
    config.addinivalue_line("markers", "query: Query handler tests")


# ============================================================================
# FAKE API FIXTURES
# ============================================================================


@pytest.fixture
def fake_api() -> FakeAgentLinkApi:
    """Provide an empty fake AgentLink API that only answers authentication."""
    return FakeAgentLinkApi()


@pytest.fixture
def api_client(fake_api: FakeAgentLinkApi) -> AgentLinkApiClient:
    """Provide a real API client wired to the fake API."""
    return AgentLinkApiClient(base_url=BASE_URL, client_id="client-id", secret="client-secret", transport=fake_api.transport)  # pragma: allowlist secret


# ============================================================================
# MOCKED CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def mock_api_client() -> MagicMock:
    """Provide a mock API client for testing command/query handlers.

    Every coroutine of AgentLinkApiClient is an AsyncMock returning None;
    tests set the return values they need.
    """
    mock: MagicMock = MagicMock(spec=AgentLinkApiClient)
    mock.application_id = None
    mock.application_name = None
    for method_name in dir(AgentLinkApiClient):
        if method_name.endswith("_async"):
            setattr(mock, method_name, AsyncMock(return_value=None))
    return mock


# ============================================================================
# TEST SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide settings pointing at the fake API."""
    return Settings(base_url=BASE_URL, client_id="client-id", secret="client-secret")  # pragma: allowlist secret
