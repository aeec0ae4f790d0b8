"""ORM Models: SQLAlchemy declarative models for the page store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata

Design Decisions:
    - All models imported here so create_all sees them before tables are created
"""

from app.models.page_record import PageByName, PageById  # noqa: F401
