"""Page Record: the persisted unit of content and the typed input that mutates it.

Invariants:
    - id and name are set once at creation and never change
    - inserted is set once; updated is stamped on every write
    - html is always the rendering of the current content
    - model_dump_json/model_validate_json round-trip compares equal field-for-field

Design Decisions:
    - pydantic model over dataclass: the JSON codec is the storage format, so the
      record validates itself on the way back out of the store
    - PageInput is the typed request struct; the service never sees untyped maps
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PageInput(BaseModel):
    """Author-editable fields, as submitted on create or update."""
    model_config = ConfigDict(frozen=True)

    title: str = ""
    content: str = ""
    author: str = ""
    website: str = ""
    twitter: str = ""
    github: str = ""
    facebook: str = ""
    instagram: str = ""


class Page(BaseModel):
    """A published Markdown page plus author profile."""
    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str
    title: str
    content: str
    html: str
    author: str = ""
    website: str = ""
    twitter: str = ""
    github: str = ""
    facebook: str = ""
    instagram: str = ""
    inserted: datetime
    updated: datetime

    def with_input(self, data: PageInput, html: str, updated: datetime) -> "Page":
        """Copy with author-editable fields replaced; id, name, inserted kept."""
        return self.model_copy(update={
            **data.model_dump(),
            "html": html,
            "updated": updated,
        })
