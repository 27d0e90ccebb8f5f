"""
Pytest configuration and shared fixtures.

Upstream inference calls are simulated with httpx.MockTransport, so no test
touches the network.

Usage:
    async def test_example(mock_upstream):
        transport, calls = mock_upstream(200, [{"generated_text": "好"}])
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from src.core.config.models import ServerConfig
from src.web.main import create_app


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def server_config():
    """ServerConfig with a credential set, so model calls go to the transport."""
    return ServerConfig(hf_api_token="hf_test_token", request_timeout=5.0)


@pytest.fixture
def no_credential_config():
    """ServerConfig as it looks when HF_API_TOKEN is not set."""
    return ServerConfig()


# =============================================================================
# UPSTREAM FIXTURES
# =============================================================================


@pytest.fixture
def mock_upstream():
    """
    Factory fixture for a fake inference endpoint.

    Returns (transport, calls): `calls` collects every httpx.Request the
    transport saw. Pass `exc` to make the transport raise instead of reply,
    or `content` to reply with raw bytes.
    """
    def _create(status_code: int = 200, json_body=None, content: bytes | None = None, exc: Exception | None = None):
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        return httpx.MockTransport(handler), calls
    return _create


# =============================================================================
# APP FIXTURES
# =============================================================================


@pytest.fixture
def make_client():
    """
    Factory fixture building a TestClient around create_app().

    Usage:
        def test_example(make_client, server_config, mock_upstream):
            transport, _ = mock_upstream(503)
            client = make_client(server_config, transport)
    """
    def _create(config: ServerConfig, transport: httpx.AsyncBaseTransport | None = None) -> TestClient:
        return TestClient(create_app(config, transport=transport))
    return _create


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
