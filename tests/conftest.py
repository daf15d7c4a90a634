import logging

import httpx
import pytest

from src.core.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without the daemon's variables in the environment."""
    for name in ("ENVIRONMENT", "ADMIN_API_KEY", "ADMIN_CALLER_INTERVAL_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def root_log_level():
    """Each test starts from the library default WARNING root level."""
    root = logging.getLogger()
    previous = root.level
    root.setLevel(logging.WARNING)
    yield
    root.setLevel(previous)


@pytest.fixture
def settings():
    return Settings(_env_file=None, ENVIRONMENT="dev", ADMIN_API_KEY="test-key")


@pytest.fixture
def make_client():
    """Build an AsyncClient whose requests are answered by `handler` and recorded."""

    def factory(handler):
        requests = []

        def transport_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(transport_handler))
        client.requests = requests
        return client

    return factory
