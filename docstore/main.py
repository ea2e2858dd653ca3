"""Docstore API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DocStoreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One Store per app, built from settings unless one is injected

Design Decisions:
    - create_app() factory: tests inject their own Store and teardown
    - Lifespan over @app.on_event: logging configured once at startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docstore.api.error_handlers import register_error_handlers
from docstore.api.routes import collections, health, store_paths
from docstore.config import Settings, get_settings
from docstore.core.store import Store
from docstore.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    store: Store | None = None, settings: Settings | None = None,
) -> FastAPI:
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Docstore API started")
        yield
        logger.info("Docstore API shutting down")

    app = FastAPI(title="Docstore API", version="0.1.0", lifespan=lifespan)
    app.state.store = store if store is not None else Store.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(store_paths.router)
    app.include_router(collections.router)

    register_error_handlers(app)
    return app


app = create_app()
