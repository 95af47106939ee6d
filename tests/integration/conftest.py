"""Integration test fixtures (app wired to faked providers).

The inference providers are faked at the httpx transport layer so the real
ProviderClient, stages and pipeline run unchanged. Firebase is replaced by a
mocked PushRelay.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from chatterjoy.api.dependencies import get_provider_client, get_push_relay, get_settings
from chatterjoy.main import app
from chatterjoy.notifications.push_relay import PushRelay
from chatterjoy.providers.client import ProviderClient


@pytest.fixture
def mock_push_relay():
    """PushRelay double; `send` resolves to an FCM message id by default."""
    relay = Mock(spec=PushRelay)
    relay.send = AsyncMock(return_value="projects/chatterjoy-test/messages/0:1")
    return relay


@pytest.fixture
def client(test_settings, fake_providers, mock_push_relay):
    """TestClient with settings, provider transport and push relay overridden.

    Tests may mutate `test_settings` (e.g. drop a credential) before issuing
    requests; the override returns the same object on every call.
    """
    provider_client = ProviderClient(
        timeout=test_settings.PROVIDER_TIMEOUT,
        transport=fake_providers.transport,
    )
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_provider_client] = lambda: provider_client
    app.dependency_overrides[get_push_relay] = lambda: mock_push_relay

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()
