"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hypecrew.config import settings
from hypecrew.infrastructure.auth.session_manager import SessionManager
from hypecrew.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from hypecrew.infrastructure.web.routers import (
    applications,
    auth,
    gigs,
    navigation,
    profiles,
)

# Configure logging
logging.basicConfig(
    level=settings.effective_log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    missing = settings.missing_backend_settings()
    if missing:
        logger.warning(
            f"Backend not configured ({', '.join(missing)} unset); "
            "sign-in and gig requests will fail until they are set"
        )

    yield

    # Shutdown
    logger.info("Shutting down application")
    await app.state.session_manager.close_all()


def create_application(session_manager: Optional[SessionManager] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )
    app.state.session_manager = session_manager if session_manager is not None else SessionManager()

    # Add CORS middleware; the session cookie needs credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware)

    # Include routers
    app.include_router(
        auth.router,
        prefix=f"{settings.api_prefix}/auth",
        tags=["Authentication"]
    )
    app.include_router(
        gigs.router,
        prefix=f"{settings.api_prefix}/gigs",
        tags=["Gigs"]
    )
    app.include_router(
        applications.router,
        prefix=f"{settings.api_prefix}/applications",
        tags=["Applications"]
    )
    app.include_router(
        profiles.router,
        prefix=settings.api_prefix,
        tags=["Profiles"]
    )
    app.include_router(
        navigation.router,
        prefix=settings.api_prefix,
        tags=["Navigation"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version,
            "backend_configured": not settings.missing_backend_settings(),
            "active_sessions": len(app.state.session_manager),
        }

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hypecrew.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.effective_log_level.lower(),
    )
