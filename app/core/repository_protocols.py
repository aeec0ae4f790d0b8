"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in PageStore: implementations do IO; the collaborators below are
      synchronous because they are pure (render) or local (tokens, clock)
"""

from datetime import datetime
from typing import Awaitable, Callable, Protocol

from app.core.domain_types import PageId, PageName
from app.core.page import Page


PageVisitor = Callable[[str, Page], Awaitable[None]]


class PageStore(Protocol):
    """Contract for dual-index page persistence: implemented by shell."""
    async def put(self, page: Page) -> None: ...
    async def get_by_name(self, name: PageName) -> Page | None: ...
    async def get_by_id(self, page_id: PageId) -> Page | None: ...
    async def iterate_all(self, visit: PageVisitor) -> None: ...


class MarkdownRenderer(Protocol):
    """Markdown source to HTML. Total and pure."""
    def __call__(self, source: str) -> str: ...


class TokenGenerator(Protocol):
    """Fresh, unpredictable random string of the given length."""
    def __call__(self, length: int) -> str: ...


class Clock(Protocol):
    """Current time, timezone-aware."""
    def __call__(self) -> datetime: ...
