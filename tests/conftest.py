"""Shared pytest fixtures for gagara_client tests."""

from __future__ import annotations

import pytest

from gagara_client import ClientConfig, GagaraClient
from tests.fixtures.mock_service import MockGagaraService

BASE_URL = "http://gagara.test"


@pytest.fixture
def mock_service():
    """Empty in-memory gagara service."""
    return MockGagaraService()


@pytest.fixture
def make_client(mock_service):
    """Factory fixture for clients wired to the mock service."""
    def _factory(**config_kwargs) -> GagaraClient:
        config_kwargs.setdefault("base_url", BASE_URL)
        return GagaraClient(
            config=ClientConfig(**config_kwargs),
            transport=mock_service.get_transport(),
        )
    return _factory


@pytest.fixture
def client(make_client):
    """Client with default settings wired to the mock service."""
    return make_client()


@pytest.fixture
def users_dataset(mock_service, client):
    """A known dataset registered under the token 'test-token'."""
    mock_service.add_dataset("test-token", "id,name\n1,Alice\n2,Bob", name="users")
    return client.from_token("test-token")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GAGARA_* settings of the developer's shell out of the tests."""
    for var in ("GAGARA_URL", "GAGARA_TIMEOUT", "GAGARA_FORMAT"):
        monkeypatch.delenv(var, raising=False)
