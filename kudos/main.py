"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
The DI container is created here and owned by the application.
"""
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kudos.api.v1 import admin_router, analytics_router, comment_router, reaction_router, team_router
from kudos.core.config import get_settings
from kudos.di.base_container import BaseContainer
from kudos.di.container import DIContainer
from kudos.di.providers.database_provider import MONGO_CONNECTION_KEY

logger = logging.getLogger(__name__)


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Shutdown handler closing the database connection

    Args:
        container: DI container to serve requests from; a DIContainer wired
            to MongoDB is built when omitted

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title="Kudos API",
        description="Employee recognition API: teams, comments, reactions, admin review and analytics",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.container = container if container is not None else DIContainer(settings)

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(admin_router, prefix="/api/v1/admin")
    application.include_router(analytics_router, prefix="/api/v1/analytics")
    application.include_router(comment_router, prefix="/api/v1/comments")
    application.include_router(reaction_router, prefix="/api/v1/reactions")
    application.include_router(team_router, prefix="/api/v1/teams")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": "Kudos API",
            "version": "1.0.0",
            "docs": "/docs"
        }

    @application.on_event("shutdown")
    async def shutdown_event():
        """Close the database connection when FastAPI shuts down."""
        app_container: BaseContainer = application.state.container
        if app_container.has(MONGO_CONNECTION_KEY):
            await app_container.get(MONGO_CONNECTION_KEY).close()
        logger.info("Kudos API stopped")

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
