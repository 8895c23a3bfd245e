"""Slate API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SlateError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The lifespan owns the database pool and the TTL cache (with its sweeper);
      both are torn down on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Cache stored on app.state and handed out by a dependency, never imported
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from slate.api.error_handlers import register_error_handlers
from slate.api.routes import (
    academics, auth, canvas, essays, goals, health, schedules, tasks,
)
from slate.config import get_settings
from slate.infrastructure.cache import TTLCache
from slate.infrastructure.database import init_db
from slate.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    cache = TTLCache(default_ttl=settings.cache_default_ttl_seconds)
    cache.start_sweeper(settings.cache_sweep_interval_seconds)
    app.state.cache = cache
    logger.info("Slate API started")
    try:
        yield
    finally:
        logger.info("Slate API shutting down")
        await cache.stop_sweeper()
        cache.clear_all()
        await manager.dispose()


app = FastAPI(title="Slate API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(academics.router)
app.include_router(essays.router)
app.include_router(tasks.router)
app.include_router(goals.router)
app.include_router(canvas.router)
app.include_router(schedules.router)
