"""
==============================================================================
Product Catalog Editor - Application Entry Point
==============================================================================

FastAPI application serving the catalog editor state:
- Snapshot rendering for the editor page
- Event endpoints for search, form and delete dialogs
- One in-memory state container per running application

Usage:
------
    # Development
    uvicorn catalog_editor.main:app --reload

    # Production
    uvicorn catalog_editor.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from catalog_editor import __version__
from catalog_editor.config import Settings, get_settings
from catalog_editor.core.exceptions import register_exception_handlers
from catalog_editor.api.v1 import catalog, health
from catalog_editor.state.manager import CatalogStateManager


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Creating the catalog state on startup and closing it on shutdown
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Single-page product catalog editor",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        self._register_routers(app)
        self._register_root(app)

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

        app.state.catalog = CatalogStateManager(self._settings)

        logger.info(f"✅ Catalog state ready ({self._settings.category_locale} categories)")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        manager = getattr(app.state, "catalog", None)
        if manager is not None:
            manager.close()
            app.state.catalog = None
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

    def _register_routers(self, app: FastAPI) -> None:
        """Mount the v1 routers under /api/v1."""
        app.include_router(health.router, prefix="/api/v1")
        app.include_router(catalog.router, prefix="/api/v1")

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the current editor snapshot."""
            return RedirectResponse(url="/api/v1/catalog")

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_editor.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
