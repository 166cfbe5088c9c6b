"""Condo Listings API: FastAPI application factory.

Invariants:
    - Each create_app() call owns exactly one EntityStore (app.state.store)
    - Resource routers are mounted twice: at / (gated only by
      guard_mutations) and under /api (always gated by require_api_key)
    - Global error handlers map CondoApiError to plain-text responses
    - CORS configured from settings, not hardcoded
    - Lifespan configures logging from app.state.settings on every startup path

Design Decisions:
    - No module-level app: settings are read when create_app() runs, so a
      missing API_KEY fails at startup, not at import
      (run with `uvicorn --factory condo_api.main:create_app`)
    - Lifespan over @app.on_event
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from condo_api import __version__
from condo_api.api.dependencies import guard_mutations, require_api_key
from condo_api.api.error_handlers import register_error_handlers
from condo_api.api.routes import condos, health, listings
from condo_api.config import Settings, get_settings
from condo_api.core.entity_store import EntityStore
from condo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

RESOURCE_ROUTERS = (condos.router, listings.router)
GATED_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    store: EntityStore = app.state.store
    logger.info(
        f"Condo API started with {store.condo_count} condos "
        f"and {store.listing_count} listings",
    )
    yield
    logger.info("Condo API shutting down")


def create_app(
    settings: Settings | None = None, store: EntityStore | None = None,
) -> FastAPI:
    """Build the application with its own store and settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Condo Listings API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else EntityStore.seeded()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    # Routes: explicit registration
    app.include_router(health.router)
    for router in RESOURCE_ROUTERS:
        app.include_router(router, dependencies=[Depends(guard_mutations)])
        app.include_router(
            router, prefix=GATED_PREFIX, dependencies=[Depends(require_api_key)],
        )

    register_error_handlers(app)
    return app
