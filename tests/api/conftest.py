"""API test fixtures: httpx client against the FastAPI app with a per-test SQLite file.

Invariants:
    - db_module.db_manager points at the test database for the duration of a test
    - get_settings overridden so base_url is deterministic

Design Decisions:
    - ASGITransport does not run the lifespan; the db_manager fixture already
      created the tables
"""

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.config import Settings, get_settings
from app.main import app

TEST_BASE_URL = "https://publish.test"


@pytest.fixture
async def client(db_manager):
    original_manager = db_module.db_manager
    db_module.db_manager = db_manager
    app.dependency_overrides[get_settings] = lambda: Settings(base_url=TEST_BASE_URL)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def created_page(client):
    """Create one page through the API; returns its {id, name} payload."""
    res = await client.put("/api", json={
        "title": "Hello World", "content": "# Hi", "author": "Ann",
        "twitter": "john_doe",
    })
    assert res.status_code == 200
    return res.json()["payload"]
