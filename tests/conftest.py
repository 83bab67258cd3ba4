"""Shared test fixtures and configuration."""

from typing import Callable, Generator
from unittest.mock import MagicMock, patch

import pytest

from tmdb_client import ClientConfig, Proxy, Response, TMDb
from tmdb_client._backends import HttpxBackend


API_KEY = "test-api-key"


# ============== Configuration Fixtures ==============

@pytest.fixture
def proxies() -> list[Proxy]:
    """Three plain proxies."""
    return [
        Proxy(host="proxy1", port=8080),
        Proxy(host="proxy2", port="8080"),
        Proxy(host="proxy3", port=3128, login="user", password="secret", auth=True),
    ]


@pytest.fixture
def default_config() -> ClientConfig:
    """Configuration without proxies."""
    return ClientConfig(api_key=API_KEY)


@pytest.fixture
def config_with_proxies(proxies: list[Proxy]) -> ClientConfig:
    """Configuration with proxy rotation enabled."""
    return ClientConfig(api_key=API_KEY, use_proxy=True, proxies=proxies)


# ============== Response Fixtures ==============

@pytest.fixture
def make_response() -> Callable[..., Response]:
    """Factory for backend responses."""

    def _make(status_code: int = 200, content: bytes = b"{}", url: str = "https://api.test/3") -> Response:
        return Response(
            status_code=status_code,
            headers={"Content-Type": "application/json"},
            content=content,
            url=url,
            elapsed=0.1,
        )

    return _make


# ============== Mock Fixtures ==============

@pytest.fixture
def mock_backend(make_response) -> MagicMock:
    """Mock backend for testing without network."""
    backend = MagicMock(spec=HttpxBackend)
    backend.get.return_value = make_response(200, b'{"id": 42, "name": "Show"}')
    return backend


# ============== Client Fixtures ==============

@pytest.fixture
def client(mock_backend: MagicMock) -> Generator[TMDb, None, None]:
    """TMDb client with mocked backend."""
    with patch("tmdb_client.client.create_backend", return_value=mock_backend):
        client = TMDb(API_KEY)
        yield client
        client.close()


@pytest.fixture
def proxied_client(
    mock_backend: MagicMock, config_with_proxies: ClientConfig
) -> Generator[TMDb, None, None]:
    """TMDb client rotating through three proxies, with mocked backend."""
    with patch("tmdb_client.client.create_backend", return_value=mock_backend):
        client = TMDb(config=config_with_proxies)
        yield client
        client.close()

