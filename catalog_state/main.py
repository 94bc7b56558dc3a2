"""
==============================================================================
Product Catalog - HTTP Shell Entry Point
==============================================================================

FastAPI application exposing one catalog state engine per application
instance:
- RESTful catalog commands (search, paging, editing, submit, delete)
- Health probes

The catalog service is created in the lifespan, bound to the running
event loop for debounced search commits, and stored on ``app.state``.

Usage:
------
    # Development
    uvicorn catalog_state.main:app --reload

    # Production
    uvicorn catalog_state.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_state.config import Settings, get_settings
from catalog_state.core.exceptions import register_exception_handlers
from catalog_state.api.router import api_router
from catalog_state.services.catalog_service import create_catalog_service
from catalog_state.services.scheduler import AsyncioScheduler, Scheduler


# Module logger
logger = logging.getLogger(__name__)


# ============================================================================
# LOGGING SETUP
# ============================================================================

def configure_logging(settings: Settings) -> None:
    """Configure root logging for the HTTP shell."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Startup and shutdown events
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
            scheduler: Scheduler for search commits (running loop if None)
        """
        self._settings = settings or get_settings()
        self._scheduler = scheduler
        configure_logging(self._settings)
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="In-memory product catalog with search, paging and editing",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown(app)

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        scheduler = self._scheduler or AsyncioScheduler(asyncio.get_running_loop())
        catalog = create_catalog_service(self._settings, scheduler)
        app.state.catalog_service = catalog

        logger.info(f"✅ Catalog ready with {len(catalog.store)} products")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        catalog = getattr(app.state, "catalog_service", None)
        if catalog is not None:
            catalog.close()
            app.state.catalog_service = None
        logger.info("✅ Shutdown complete")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


def create_app(
    settings: Optional[Settings] = None,
    scheduler: Optional[Scheduler] = None
) -> FastAPI:
    """Build a new FastAPI application with its own catalog."""
    return Application(settings, scheduler).app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

app = create_app()


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "catalog_state.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
