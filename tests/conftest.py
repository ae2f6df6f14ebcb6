"""Pytest configuration and shared fixtures for mywaifu-client tests."""

import pytest

from mywaifu_client import ClientBuilder
from mywaifu_client.testing import route_transport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear MyWaifuList environment variables before each test.

    This prevents test pollution when testing API key resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("MYWAIFULIST_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def api_key():
    return "test-api-key"


@pytest.fixture
def make_client(api_key):
    """Factory for clients whose requests are answered by a route table."""
    clients = []

    def _make(routes, **builder_options):
        builder = ClientBuilder(api_key).with_transport(route_transport(routes))
        for name, value in builder_options.items():
            builder = getattr(builder, f"with_{name}")(value)
        client = builder.build()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
