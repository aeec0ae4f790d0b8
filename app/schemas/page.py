"""Page Schemas: API request bodies and the {ok, msg, payload} response envelope.

Invariants:
    - PageCreate/PageUpdate convert to PageInput; no untyped maps reach the service
    - PublicPage NEVER carries the capability token (id)
    - Missing optional fields default to "" (same as an empty form value)

Design Decisions:
    - Shape checks only (types, lengths); content rules stay in core so the API and
      any other caller get the same messages
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.core.page import Page, PageInput


class PageCreate(BaseModel):
    """Body of PUT /api."""
    title: str = Field("", max_length=500)
    content: str = Field("", max_length=200_000)
    author: str = Field("", max_length=200)
    website: str = Field("", max_length=2000)
    twitter: str = Field("", max_length=100)
    github: str = Field("", max_length=100)
    facebook: str = Field("", max_length=100)
    instagram: str = Field("", max_length=100)

    def to_input(self) -> PageInput:
        return PageInput(**self.model_dump())


class PageUpdate(PageCreate):
    """Body of POST /api: the edit form carries id and name."""
    id: str = Field("", max_length=64)
    name: str = Field("", max_length=255)

    def to_input(self) -> PageInput:
        return PageInput(**self.model_dump(exclude={"id", "name"}))


class PublicPage(BaseModel):
    """Page as shown to readers."""
    name: str
    title: str
    html: str
    author: str
    website: str
    twitter: str
    github: str
    facebook: str
    instagram: str
    inserted: datetime
    updated: datetime

    @classmethod
    def from_page(cls, page: Page) -> "PublicPage":
        return cls(**page.model_dump(exclude={"id", "content"}))


class ApiResponse(BaseModel):
    """Success envelope shared by all /api responses."""
    ok: bool = True
    msg: str = "Saved"
    payload: Any = None


def saved_response(page: Page) -> ApiResponse:
    return ApiResponse(payload={"id": page.id, "name": page.name})
