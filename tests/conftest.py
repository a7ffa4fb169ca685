"""Pytest configuration and fixtures for vikunja_mcp tests."""

import tempfile
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import AsyncMock, patch
from zoneinfo import ZoneInfo

import httpx
import pytest

from vikunja_mcp.clients.vikunja import VikunjaClient
from vikunja_mcp.tools.reminders import ReminderTools

BASE_URL = "https://vikunja.example.com"


def _response(status_code: int, json_body=None, content: bytes | None = None) -> httpx.Response:
    request = httpx.Request("GET", BASE_URL)
    if content is not None:
        return httpx.Response(status_code, content=content, request=request)
    return httpx.Response(status_code, json=json_body, request=request)


def _client(timezone_name: str = "UTC") -> VikunjaClient:
    return VikunjaClient(
        base_url=BASE_URL,
        create_token="create-token",
        read_token="read-token",
        zone=ZoneInfo(timezone_name),
        timezone_name=timezone_name,
        timeout=5.0,
    )


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Factory for real httpx.Response objects returned by the mocked client."""
    return _response


@pytest.fixture
def make_client() -> Callable[..., VikunjaClient]:
    """Factory for VikunjaClient instances with fake tokens in a given zone."""
    return _client


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed reference time."""
    return datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient and yield the client used inside ``async with``."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_client_class.return_value.__aexit__.return_value = None
        mock_client.request = AsyncMock(return_value=_response(200, []))
        mock_client.client_class = mock_client_class
        yield mock_client


@pytest.fixture
def client() -> VikunjaClient:
    """A VikunjaClient in UTC."""
    return _client()


@pytest.fixture
def tools(client: VikunjaClient) -> ReminderTools:
    """ReminderTools bound to the UTC client."""
    return ReminderTools(client)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixed_clock_tools(client: VikunjaClient, fixed_now: datetime) -> ReminderTools:
    """ReminderTools whose clock always returns ``fixed_now``."""
    return ReminderTools(client, clock=lambda: fixed_now)
