"""Service test fixtures: real SQLite-backed service plus an in-memory recording store.

Invariants:
    - publishing_service uses the real SqlitePageStore, renderer and token generator
    - RecordingStore counts put() calls so tests can assert "no write happened"

Design Decisions:
    - Fake store implements the PageStore Protocol structurally (no inheritance)
"""

from datetime import datetime, timezone

import pytest

from app.infrastructure.markdown_renderer import render_markdown
from app.infrastructure.random_tokens import random_string
from app.services.publishing import PublishingService


class RecordingStore:
    """Dict-backed PageStore that records every put()."""

    def __init__(self):
        self.by_name = {}
        self.by_id = {}
        self.puts = []

    async def put(self, page):
        self.puts.append(page)
        self.by_name[page.name] = page
        self.by_id[page.id] = page.name

    async def get_by_name(self, name):
        return self.by_name.get(name)

    async def get_by_id(self, page_id):
        name = self.by_id.get(page_id)
        return self.by_name[name] if name is not None else None

    async def iterate_all(self, visit):
        for name in sorted(self.by_name):
            await visit(name, self.by_name[name])


class FrozenClock:
    """Clock that returns the same instant until moved."""

    def __init__(self, at: datetime):
        self.at = at

    def __call__(self) -> datetime:
        return self.at


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def frozen_clock():
    return FrozenClock(datetime(2026, 10, 18, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def fake_service(recording_store, frozen_clock):
    return PublishingService(
        recording_store, render=render_markdown,
        random_string=random_string, now=frozen_clock,
    )


@pytest.fixture
def publishing_service(page_store):
    return PublishingService(
        page_store, render=render_markdown, random_string=random_string,
    )
