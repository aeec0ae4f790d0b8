"""Publish API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PublishError → {"ok": false, ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and tables created on startup via lifespan; engine
      disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, pages, site
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        busy_timeout_ms=settings.sqlite_busy_timeout_ms,
    )
    await manager.create_tables()
    logger.info("Publish API started")
    yield
    await manager.dispose()
    logger.info("Publish API shutting down")


app = FastAPI(
    title="Publish API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(pages.router)
app.include_router(site.router)
# Catch-all /{name} goes last
app.include_router(site.page_router)

register_error_handlers(app)
