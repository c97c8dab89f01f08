"""
Shared pytest fixtures and configuration for all tests.
"""

import asyncio
import os
import sys
from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
import strawberry

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from spacetrips.auth.context import AuthUser
from spacetrips.database.store import Store
from spacetrips.datasources.launch import LaunchAPI
from spacetrips.datasources.models import Launch, Mission, Rocket
from spacetrips.datasources.user import UserAPI
from spacetrips.graphql.context import RequestContext

MOCK_LAUNCH_RESPONSE: dict[str, Any] = {
    "flight_number": 1,
    "launch_date_unix": 1143239400,
    "launch_site": {"site_name": "Kwajalein Atoll"},
    "mission_name": "FalconSat",
    "links": {
        "mission_patch_small": "https://images2.imgbox.com/3c/0e/T8iJcSN3_o.png",
        "mission_patch": "https://images2.imgbox.com/40/e3/GypSkayF_o.png",
    },
    "rocket": {
        "rocket_id": "falcon1",
        "rocket_name": "Falcon 1",
        "rocket_type": "Merlin A",
    },
}


def make_launch(launch_id: int, cursor: str | None = None) -> Launch:
    """Build a launch record with just enough data for resolver tests."""
    return Launch(
        id=launch_id,
        cursor=cursor if cursor is not None else str(launch_id),
        site="Kwajalein Atoll",
        mission=Mission(name=f"Mission {launch_id}"),
        rocket=Rocket(id="falcon1", name="Falcon 1", type="Merlin A"),
    )


def raw_launch(flight_number: int, launch_date_unix: int) -> dict[str, Any]:
    """A provider record for another flight, shaped like the mock response."""
    return {
        **MOCK_LAUNCH_RESPONSE,
        "flight_number": flight_number,
        "launch_date_unix": launch_date_unix,
        "mission_name": f"Mission {flight_number}",
    }


@pytest.fixture
def mock_store() -> Store:
    """A store whose table operations are AsyncMocks."""
    return Store(
        users=MagicMock(find_or_create=AsyncMock(), find_all=AsyncMock()),
        trips=MagicMock(find_or_create=AsyncMock(), destroy=AsyncMock(), find_all=AsyncMock()),
    )


@pytest.fixture
def auth_user() -> AuthUser:
    return AuthUser(id=1, email="a@a.a")


@pytest.fixture
def make_info() -> Callable[..., Any]:
    """Create mock GraphQL info objects carrying a request context."""

    def _make_info(
        user: AuthUser | None = None,
        launch_api: Any = None,
        user_api: Any = None,
    ) -> Any:
        info = MagicMock(spec=strawberry.Info)
        info.context = RequestContext(
            launch_api=launch_api or AsyncMock(spec=LaunchAPI),
            user_api=user_api or AsyncMock(spec=UserAPI),
            user=user,
        )
        return info

    return _make_info


class FakeLaunchProvider:
    """Mock launch provider that serves raw records and counts requests."""

    def __init__(self, payload: Any, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code
        self.calls = 0

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        # Yield so concurrent callers can pile up behind the first fetch
        await asyncio.sleep(0)
        if not request.url.path.endswith("/launches"):
            return httpx.Response(404)
        return httpx.Response(self.status_code, json=self.payload)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def mock_launch_response() -> dict[str, Any]:
    return dict(MOCK_LAUNCH_RESPONSE)


@pytest.fixture
def launch_provider() -> Callable[..., FakeLaunchProvider]:
    """Factory for fake launch providers."""
    return FakeLaunchProvider


@pytest.fixture
def launch_catalog() -> Callable[..., LaunchAPI]:
    """A launch catalog serving the given launches without any HTTP."""

    def _launch_catalog(launches: list[Launch]) -> LaunchAPI:
        launch_api = LaunchAPI(client=MagicMock(spec=httpx.AsyncClient))
        launch_api.get_all_launches = AsyncMock(return_value=list(launches))
        return launch_api

    return _launch_catalog


@pytest.fixture
def launch_factory() -> Callable[..., Launch]:
    return make_launch


@pytest.fixture
def raw_launch_factory() -> Callable[[int, int], dict[str, Any]]:
    return raw_launch


@pytest_asyncio.fixture
async def sqlite_database() -> AsyncGenerator[None, None]:
    """Point the shared connection pool at a fresh in-memory SQLite database."""
    from spacetrips.database.connection import create_tables, dispose_database, init_database

    init_database("sqlite+aiosqlite://", force_reinit=True)
    await create_tables()
    yield
    await dispose_database()


@pytest.fixture
def store(sqlite_database: None) -> Store:
    """SQL-backed store on the in-memory database."""
    return Store.create()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
