"""Async Engine Factory: builds the SQLite engine with connection pragmas installed.

Invariants:
    - Every engine built here gets the pragmas from db/sqlite_pragmas.py

Design Decisions:
    - Separate from infrastructure/database.py so scripts can open the store
      without the FastAPI-facing session manager
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.db.sqlite_pragmas import install_sqlite_pragmas


def create_engine_for(database_url: str, busy_timeout_ms: int = 5000) -> AsyncEngine:
    """Create an async engine with the SQLite pragmas installed."""
    engine = create_async_engine(database_url, echo=False)
    install_sqlite_pragmas(engine, busy_timeout_ms)
    return engine
