"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from home_control import __version__
from home_control.api.v1 import control_router, device_router, usage_router
from home_control.core.logging_config import configure_logging
from home_control.di.container import DIContainer, build_container
from home_control.infrastructure.db.mongo_connection import close_mongo_client

logger = logging.getLogger(__name__)


def create_application(container: Optional[DIContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - Dependency container (built from settings unless one is given)
    - CORS middleware configuration
    - API route registration

    Args:
        container: Pre-built container, e.g. with in-memory collaborators

    Returns:
        Configured FastAPI application instance
    """
    configure_logging()

    # Create FastAPI app
    application = FastAPI(
        title="Home Control API",
        description="Device registry, on/off control and usage log",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.container = container or build_container()

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(device_router, prefix="/api/v1/devices")
    application.include_router(control_router, prefix="/api/v1/control")
    application.include_router(usage_router, prefix="/api/v1/usage")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": "Home Control API",
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @application.on_event("shutdown")
    async def shutdown_event():
        """Release the database client when FastAPI shuts down."""
        if application.state.container.has("mongo_database"):
            close_mongo_client()
        logger.info("Home Control API stopped")

    logger.info(
        f"Home Control API ready (storage backend: {application.state.container.settings.storage_backend})"
    )
    return application


# Create application instance
app = create_application()
