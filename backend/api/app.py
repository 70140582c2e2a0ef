"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.database import ping_store
from shared.exceptions import ExternalServiceError

from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .routes import health
from modules.billing.routes import router as billing_router
from modules.comments.routes import router as comments_router
from modules.favorites.routes import router as favorites_router
from modules.lessons.routes import router as lessons_router
from modules.reports.routes import router as reports_router
from modules.users.routes import router as users_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once, at the level from LOG_LEVEL."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the service container, pings the store, and closes the
    container on shutdown.
    """
    # Startup
    container: ServiceContainer = app.state.container
    settings = container.settings
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    container.open()
    try:
        ping_store(container.db)
    except ExternalServiceError as e:
        logger.error(f"Store ping failed at startup: {e.message}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    container.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the environment

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Lessons marketplace API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.container = ServiceContainer(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(users_router, tags=["users"])
    app.include_router(lessons_router, tags=["lessons"])
    app.include_router(comments_router, tags=["comments"])
    app.include_router(favorites_router, tags=["favorites"])
    app.include_router(reports_router, tags=["reports"])
    app.include_router(billing_router, tags=["billing"])

    return app


# Application instance for uvicorn
app = create_app()
