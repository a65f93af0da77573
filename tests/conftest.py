"""
Shared fixtures for mailerlite_client tests.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock
import respx

import httpx

from mailerlite_client.config import ClientConfig
from mailerlite_client.core.dispatcher import AsyncDispatcher, SyncDispatcher

BASE_URL = "https://connect.mailerlite.com/api"
API_KEY = "test-api-key-1234567890"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MAILERLITE_* settings from the shell out of the tests."""
    for name in ("MAILERLITE_API_KEY", "MAILERLITE_BASE_URL", "MAILERLITE_TRACE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_client_config():
    """Sample ClientConfig for testing."""
    return ClientConfig(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def router():
    """respx router mounted through httpx.MockTransport (no global patching)."""
    return respx.MockRouter(assert_all_called=False)


@pytest.fixture
def async_dispatcher(sample_client_config, router):
    transport = httpx.MockTransport(router.async_handler)
    return AsyncDispatcher(sample_client_config, httpx_client=httpx.AsyncClient(transport=transport))


@pytest.fixture
def sync_dispatcher(sample_client_config, router):
    transport = httpx.MockTransport(router.handler)
    return SyncDispatcher(sample_client_config, httpx_client=httpx.Client(transport=transport))


@pytest.fixture
def mock_httpx_async_client():
    """Mock httpx.AsyncClient for testing."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_httpx_sync_client():
    """Mock httpx.Client for testing."""
    client = MagicMock(spec=httpx.Client)
    client.close = MagicMock()
    return client
