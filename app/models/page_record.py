"""Page Index ORM: the two logical buckets of the page store, one table each.

Invariants:
    - pages_by_name: name (PK) → record, the full serialized Page (JSON text)
    - pages_by_id:   id (PK)   → name, a pointer into pages_by_name
    - Both rows for a page are written in the same transaction (page_store.put)
    - Primary keys use SQLite's default BINARY collation: ORDER BY name is
      lexicographic by bytes

Design Decisions:
    - Serialized record over one column per field: the stored value is exactly
      Page.model_dump_json(), so adding a profile field needs no table change
    - No FK from pages_by_id.name: the pointer is kept consistent by the
      single-transaction write, and rows are never deleted
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class PageByName(Base):
    """Primary bucket: public name to serialized page."""
    __tablename__ = "pages_by_name"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    record: Mapped[str] = mapped_column(Text, nullable=False)


class PageById(Base):
    """Secondary bucket: capability token to public name."""
    __tablename__ = "pages_by_id"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
