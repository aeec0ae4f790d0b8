"""Site Files: sitemap.txt, robots.txt and the rendered page at /{name}.

Invariants:
    - sitemap.txt is text/plain: "{base_url}/" then "{base_url}/{name}" per page,
      names ascending (store order)
    - robots.txt allows everything and points crawlers at the sitemap
    - every "{base_url}/{name}" line in sitemap.txt is served by GET /{name}

Design Decisions:
    - Names collected through PublishingService.sitemap_names(); the store's full
      scan is the only listing operation
    - GET /{name} lives on page_router, included last in main.py so it never
      shadows /sitemap.txt, /robots.txt or /api
    - Page body is the stored html; only the title is escaped here
"""

import html
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from app.api.dependencies import get_publishing_service
from app.config import Settings, get_settings
from app.core.domain_types import PageName
from app.core.errors import PageNotFoundError
from app.core.page import Page
from app.services.publishing import NAME_NOT_FOUND_MESSAGE, PublishingService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["site"])
page_router = APIRouter(tags=["site"])


@router.get("/sitemap.txt", response_class=PlainTextResponse)
async def sitemap(
    service: PublishingService = Depends(get_publishing_service),
    settings: Settings = Depends(get_settings),
):
    names = await service.sitemap_names()
    lines = [f"{settings.base_url}/"]
    lines.extend(f"{settings.base_url}/{name}" for name in names)
    return "\n".join(lines) + "\n"


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(settings: Settings = Depends(get_settings)):
    return f"User-agent: *\nDisallow:\n\nSitemap: {settings.base_url}/sitemap.txt\n"


def render_page_document(page: Page) -> str:
    """Wrap the stored page html in a minimal HTML document."""
    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="utf-8">'
        f"<title>{html.escape(page.title)}</title></head>\n"
        f"<body>\n{page.html}\n</body></html>\n"
    )


@page_router.get("/{name}", response_class=HTMLResponse)
async def serve_page(
    name: str,
    service: PublishingService = Depends(get_publishing_service),
):
    """Serve a published page at the URL sitemap.txt advertises."""
    page = await service.view(PageName(name))
    if page is None:
        logger.info("Page not found", extra={"page_name": name})
        raise PageNotFoundError(NAME_NOT_FOUND_MESSAGE)
    return render_page_document(page)
