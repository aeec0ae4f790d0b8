"""Page Store: dual-index persistence of Page records in one SQLite file.

Invariants:
    - put() upserts pages_by_name AND pages_by_id in ONE write transaction;
      both commit or neither does
    - get_by_name()/get_by_id() return None for a missing key (not an error)
    - get_by_id() resolves id → name → record inside one read transaction;
      a dangling pointer is an inconsistency and raises StorageFault
    - iterate_all() visits every page once, ascending by name, in one read
      snapshot; the first exception raised by visit stops the scan and propagates
    - Storage and (de)serialization failures surface as StorageFault, never retried

Design Decisions:
    - INSERT ... ON CONFLICT DO UPDATE over ORM merge: no read-before-write, so
      the write transaction's first statement takes the write lock directly
    - Streaming scan: a long sitemap walk holds a WAL snapshot and leaves
      concurrent writers unblocked
"""

import logging

from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from app.core.domain_types import PageId, PageName
from app.core.errors import StorageFault
from app.core.page import Page
from app.core.repository_protocols import PageVisitor
from app.infrastructure.database import DatabaseSessionManager
from app.models.page_record import PageById, PageByName

logger = logging.getLogger(__name__)


class SqlitePageStore:
    """PageStore implementation over the two page tables."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def put(self, page: Page) -> None:
        """Write both index entries for page atomically."""
        record = _encode(page)

        by_name = sqlite_insert(PageByName).values(name=page.name, record=record)
        by_name = by_name.on_conflict_do_update(
            index_elements=[PageByName.name],
            set_={"record": by_name.excluded.record},
        )
        by_id = sqlite_insert(PageById).values(id=page.id, name=page.name)
        by_id = by_id.on_conflict_do_update(
            index_elements=[PageById.id],
            set_={"name": by_id.excluded.name},
        )

        async with self._db.session() as db:
            async with db.begin():
                await db.execute(by_name)
                await db.execute(by_id)

        logger.debug("Page stored", extra={"page_name": page.name})

    async def get_by_name(self, name: PageName) -> Page | None:
        async with self._db.session() as db:
            async with db.begin():
                record = await db.scalar(
                    select(PageByName.record).where(PageByName.name == name),
                )
        if record is None:
            return None
        return _decode(name, record)

    async def get_by_id(self, page_id: PageId) -> Page | None:
        async with self._db.session() as db:
            async with db.begin():
                name = await db.scalar(
                    select(PageById.name).where(PageById.id == page_id),
                )
                if name is None:
                    return None
                record = await db.scalar(
                    select(PageByName.record).where(PageByName.name == name),
                )
        if record is None:
            logger.error(
                "Id index points at a missing page",
                extra={"page_name": name, "operation": "get_by_id"},
            )
            raise StorageFault(
                f"id index entry points at missing page '{name}'", "get_by_id",
            )
        return _decode(name, record)

    async def iterate_all(self, visit: PageVisitor) -> None:
        """Await visit(name, page) for every page, ascending by name."""
        async with self._db.session() as db:
            async with db.begin():
                result = await db.stream(
                    select(PageByName.name, PageByName.record)
                    .order_by(PageByName.name),
                )
                try:
                    async for name, record in result:
                        await visit(name, _decode(name, record))
                finally:
                    await result.close()

    async def count(self) -> int:
        async with self._db.session() as db:
            async with db.begin():
                total = await db.scalar(
                    select(func.count()).select_from(PageByName),
                )
        return total or 0


def _encode(page: Page) -> str:
    try:
        return page.model_dump_json()
    except ValueError as e:
        raise StorageFault(str(e), "serialize") from e


def _decode(name: str, record: str) -> Page:
    try:
        return Page.model_validate_json(record)
    except ValidationError as e:
        logger.error(
            f"Corrupt page record: {e}",
            extra={"page_name": name, "operation": "deserialize"},
        )
        raise StorageFault(f"corrupt record for page '{name}'", "deserialize") from e
