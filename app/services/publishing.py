"""Publishing Service: create, update, lookup and view flows over the page store.

Invariants:
    - Validation and permission checks run BEFORE any store.put (fail fast, no partial writes)
    - create() assigns a fresh id and name = slug + "-" + random suffix; no
      uniqueness probe against existing names
    - update() preserves id, name, inserted; html re-rendered; updated strictly advances
    - StorageFault from the store passes through unmodified (no retries)
    - No process-wide state: store, renderer, token generator and clock are injected

Design Decisions:
    - Service depends on PageStore Protocol, not on SQLAlchemy (core/shell boundary)
    - updated bumped by 1µs when the clock has not moved past the previous write,
      so "update advances updated" holds even on coarse clocks
"""

import logging
from datetime import datetime, timedelta, timezone

from app.core.domain_types import PageId, PageName
from app.core.errors import PageNotFoundError, PermissionDeniedError
from app.core.page import Page, PageInput
from app.core.repository_protocols import (
    Clock, MarkdownRenderer, PageStore, TokenGenerator,
)
from app.core.validate_fields import validate_page_input

logger = logging.getLogger(__name__)

PAGE_ID_LENGTH = 16
PAGE_NAME_SUFFIX_LENGTH = 8

NAME_NOT_FOUND_MESSAGE = "This page name does not exist."
ID_NOT_FOUND_MESSAGE = "This page Id does not exist."


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PublishingService:
    """Orchestrates page creation and editing on top of a PageStore."""

    def __init__(
        self,
        store: PageStore,
        render: MarkdownRenderer,
        random_string: TokenGenerator,
        now: Clock = utc_now,
        id_length: int = PAGE_ID_LENGTH,
        suffix_length: int = PAGE_NAME_SUFFIX_LENGTH,
    ):
        self.store = store
        self.render = render
        self.random_string = random_string
        self.now = now
        self.id_length = id_length
        self.suffix_length = suffix_length

    async def create(self, data: PageInput) -> Page:
        """Validate, mint id and name, render, and persist a new page."""
        slug, data = validate_page_input(data)

        timestamp = self.now()
        page = Page(
            id=self.random_string(self.id_length),
            name=f"{slug}-{self.random_string(self.suffix_length)}",
            html=self.render(data.content),
            inserted=timestamp,
            updated=timestamp,
            **data.model_dump(),
        )
        await self.store.put(page)
        logger.info("Page created", extra={"page_name": page.name})
        return page

    async def update(self, page_id: PageId, name: PageName, data: PageInput) -> Page:
        """Replace the editable fields of an existing page, given its capability token."""
        existing = await self.store.get_by_name(name)
        if existing is None:
            raise PageNotFoundError(NAME_NOT_FOUND_MESSAGE)
        if existing.id != page_id:
            logger.info("Edit refused: id mismatch", extra={"page_name": name})
            raise PermissionDeniedError()

        _, data = validate_page_input(data)

        updated = self.now()
        if updated <= existing.updated:
            updated = existing.updated + timedelta(microseconds=1)

        page = existing.with_input(data, self.render(data.content), updated)
        await self.store.put(page)
        logger.info("Page updated", extra={"page_name": page.name})
        return page

    async def lookup(self, page_id: PageId) -> Page:
        """Fetch a page by its capability token."""
        page = await self.store.get_by_id(page_id)
        if page is None:
            raise PageNotFoundError(ID_NOT_FOUND_MESSAGE)
        return page

    async def view(self, name: PageName) -> Page | None:
        """Fetch a page by its public name; None when absent."""
        return await self.store.get_by_name(name)

    async def sitemap_names(self) -> list[str]:
        """All page names, ascending."""
        names: list[str] = []

        async def collect(name: str, page: Page) -> None:
            names.append(name)

        await self.store.iterate_all(collect)
        return names
