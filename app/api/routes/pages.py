"""Page API: create (PUT), update (POST), lookup by id (GET), public view by name.

Invariants:
    - PUT /api and POST /api answer {"ok": true, "msg": "Saved", "payload": {id, name}}
    - GET /api?id=... returns the full page INCLUDING id (the caller proved possession)
    - GET /api/pages/{name} returns PublicPage (no id, no raw content)
    - Domain errors raised by the service are rendered by the global handlers

Design Decisions:
    - Single /api path with method dispatch, as the editor front-end expects
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_publishing_service
from app.core.domain_types import PageId, PageName
from app.core.errors import PageNotFoundError
from app.schemas.page import (
    ApiResponse, PageCreate, PageUpdate, PublicPage, saved_response,
)
from app.services.publishing import NAME_NOT_FOUND_MESSAGE, PublishingService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["pages"])


@router.put("", response_model=ApiResponse)
async def create_page(
    body: PageCreate,
    service: PublishingService = Depends(get_publishing_service),
):
    """Publish a new page."""
    page = await service.create(body.to_input())
    return saved_response(page)


@router.post("", response_model=ApiResponse)
async def update_page(
    body: PageUpdate,
    service: PublishingService = Depends(get_publishing_service),
):
    """Edit an existing page; requires its id."""
    page = await service.update(PageId(body.id), PageName(body.name), body.to_input())
    return saved_response(page)


@router.get("", response_model=ApiResponse)
async def lookup_page(
    id: str = Query("", max_length=64),
    service: PublishingService = Depends(get_publishing_service),
):
    """Load a page for editing by its capability token."""
    page = await service.lookup(PageId(id))
    return ApiResponse(msg="Found", payload=page.model_dump(mode="json"))


@router.get("/pages/{name}", response_model=ApiResponse)
async def view_page(
    name: str,
    service: PublishingService = Depends(get_publishing_service),
):
    """Public view of a page."""
    page = await service.view(PageName(name))
    if page is None:
        logger.info("Page not found", extra={"page_name": name})
        raise PageNotFoundError(NAME_NOT_FOUND_MESSAGE)
    return ApiResponse(
        msg="Found", payload=PublicPage.from_page(page).model_dump(mode="json"),
    )
