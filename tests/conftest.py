"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add src to Python path so imports work without installing
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from fakes import BASE_URL, FakeRolimons  # noqa: E402
from roli import RoliClient  # noqa: E402
from roli.utils import reset_config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from ROLI_* variables and the config singleton."""
    for name in (
        "ROLI_BASE_URL",
        "ROLI_USER_AGENT",
        "ROLI_REQUEST_TIMEOUT",
        "ROLI_ROLI_VERIFICATION",
        "ROLI_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest_asyncio.fixture
async def make_client():
    """Build RoliClients whose requests go to a FakeRolimons handler."""
    http_clients: list[httpx.AsyncClient] = []

    def _make(fake: FakeRolimons, **kwargs) -> RoliClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
        http_clients.append(http_client)
        kwargs.setdefault("base_url", BASE_URL)
        return RoliClient(http_client=http_client, **kwargs)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()
