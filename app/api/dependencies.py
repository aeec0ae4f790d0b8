"""API Dependencies: wires the publishing service for route handlers.

Invariants:
    - One SqlitePageStore per request over the process-wide session manager
    - Service collaborators (renderer, token generator, clock) are the production ones

Design Decisions:
    - Dependency function over module singleton: tests override it through
      app.dependency_overrides or by swapping db_manager
"""

from fastapi import Depends

from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.infrastructure.markdown_renderer import render_markdown
from app.infrastructure.page_store import SqlitePageStore
from app.infrastructure.random_tokens import random_string
from app.services.publishing import PublishingService


def get_page_store(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> SqlitePageStore:
    return SqlitePageStore(db)


def get_publishing_service(
    store: SqlitePageStore = Depends(get_page_store),
    settings: Settings = Depends(get_settings),
) -> PublishingService:
    return PublishingService(
        store,
        render=render_markdown,
        random_string=random_string,
        id_length=settings.page_id_length,
        suffix_length=settings.page_name_suffix_length,
    )
