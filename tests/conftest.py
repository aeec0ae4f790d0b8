"""Root conftest: shared test configuration and page-store fixtures.

Invariants:
    - Every test gets a fresh SQLite file under tmp_path (WAL needs a real file)
    - Tables are created before the fixture yields; the engine is disposed after
"""

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.infrastructure.page_store import SqlitePageStore  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'pages.db'}",
    )
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest.fixture
async def page_store(db_manager):
    return SqlitePageStore(db_manager)
