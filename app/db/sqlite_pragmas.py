"""SQLite Connection Setup: durability and isolation settings for every new connection.

Invariants:
    - journal_mode=WAL: readers see a snapshot and never block the single writer
    - synchronous=FULL: a returned commit survives power loss
    - busy_timeout: concurrent writers wait instead of failing with "database is locked"
    - Every SQLAlchemy transaction is a real SQLite transaction (explicit BEGIN),
      so a multi-statement read sees one snapshot
    - Pragmas applied on every pool connect (they are per-connection in SQLite)

Design Decisions:
    - Driver-level autocommit + BEGIN on the "begin" event: the sqlite3 module
      otherwise defers BEGIN until the first DML statement, leaving SELECTs
      outside any transaction
    - In-memory databases keep "memory" journaling (SQLite ignores WAL there)
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine


def install_sqlite_pragmas(engine: AsyncEngine, busy_timeout_ms: int) -> None:
    """Register connect/begin hooks. No-op for non-SQLite engines."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragmas(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=FULL")
        finally:
            cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn):
        conn.exec_driver_sql("BEGIN")
