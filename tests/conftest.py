"""Pytest configuration and shared fixtures for confluence-mcp-server tests.

This module provides common fixtures used across all test modules,
including test app creation, async client setup and a small set of sample
tool components.
"""

import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from confluence_mcp_server import create_app
from confluence_mcp_server.config import ConfluenceMcpSettings
from confluence_mcp_server.tools import ToolBridge, ToolDiscoveryService, ToolRegistry, ai_tool


class EchoTools:
    """Sample component covering every parameter type the bridge coerces."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    @ai_tool(name="echo", description="Echo a message back")
    def echo(self, message: str) -> str:
        self.calls.append(("echo", message))
        return message

    @ai_tool(name="add")
    def add(self, a: int, b: int) -> int:
        """Add two integers."""
        return a + b

    @ai_tool(name="flag", return_direct=True)
    def flag(self, enabled: bool) -> str:
        return "on" if enabled else "off"

    @ai_tool()
    def describe(self, count: int, ratio: float, tags: list[str], extra: dict) -> str:
        return f"{count}|{ratio}|{tags}|{extra}"

    @ai_tool(name="fail")
    def fail(self, reason: str) -> str:
        raise RuntimeError(reason)

    @ai_tool(name="nothing")
    def nothing(self) -> None:
        return None

    @ai_tool(name="slow-echo")
    async def slow_echo(self, message: str) -> str:
        await asyncio.sleep(0)
        return f"async:{message}"

    def helper(self, value: str) -> str:
        return value


@pytest.fixture
def echo_tools():
    """Create a fresh EchoTools component."""
    return EchoTools()


@pytest.fixture
def echo_registry(echo_tools):
    """Create a ready registry populated from EchoTools."""
    registry = ToolRegistry()
    ToolDiscoveryService().discover(registry, [echo_tools])
    return registry


@pytest.fixture
def echo_bridge(echo_registry):
    """Create a ToolBridge over the EchoTools registry."""
    return ToolBridge(echo_registry)


@pytest.fixture
def test_settings():
    """Create test settings pointing at a fake Confluence instance.

    Returns:
        ConfluenceMcpSettings: Settings instance configured for testing.
    """
    return ConfluenceMcpSettings(
        host="127.0.0.1",
        port=8080,
        confluence_base_url="https://confluence.test",
        confluence_api_token="test-token",
        default_page_limit=10,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
